"""Property definitions: the closed set of kinds an entity schema may declare."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from federation.entity import Entity


class PropertyKind(StrEnum):
    """How a property is carried on the wire."""

    SCALAR = "scalar"
    ENTITY = "entity"
    ENTITY_LIST = "entity_list"


@dataclass(frozen=True)
class PropertyDef:
    """One entry of an entity schema.

    Scalars are written as ``<name>text</name>``. Nested entities are written
    under their own wire tag (``entity_type.entity_name``), not the property name.
    """

    name: str
    kind: PropertyKind
    entity_type: type[Entity] | None = None

    def __post_init__(self) -> None:
        nested = self.kind is not PropertyKind.SCALAR
        if nested and self.entity_type is None:
            raise ValueError(f"Property {self.name!r} of kind {self.kind} needs an entity type")
        if not nested and self.entity_type is not None:
            raise ValueError(f"Scalar property {self.name!r} cannot carry an entity type")

    def nested_type(self) -> type[Entity]:
        """Return the nested entity type. Raises for scalar properties."""
        if self.entity_type is None:
            raise ValueError(f"Property {self.name!r} is not a nested entity")
        return self.entity_type

    @property
    def wire_tag(self) -> str:
        """Element tag this property is read from and written to."""
        if self.entity_type is None:
            return self.name
        return self.entity_type.entity_name
