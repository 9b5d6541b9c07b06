"""Entity base: pydantic model whose annotated fields declare the property schema."""

from __future__ import annotations

import types
from typing import Annotated, Any, ClassVar, Union, assert_never, get_args, get_origin

from lxml import etree
from pydantic import BaseModel, ConfigDict

from federation.names import underscore
from federation.properties import PropertyDef, PropertyKind

_SCHEMA_CACHE: dict[type[Entity], tuple[PropertyDef, ...]] = {}


def _strip_annotated(annotation: Any) -> Any:
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def _strip_optional(annotation: Any) -> Any:
    """Reduce ``X | None`` to ``X``; leave other unions untouched."""
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _is_entity_type(candidate: Any) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, Entity)


def property_def_for(name: str, annotation: Any) -> PropertyDef:
    """Map a field annotation to its property definition.

    Args:
        name: Field name.
        annotation: Resolved field annotation.

    Returns:
        Property definition for the field.

    Raises:
        TypeError: If the annotation is not str, an Entity, or list of Entity.
    """
    target = _strip_annotated(_strip_optional(_strip_annotated(annotation)))
    if target is str:
        return PropertyDef(name, PropertyKind.SCALAR)
    if _is_entity_type(target):
        return PropertyDef(name, PropertyKind.ENTITY, target)
    if get_origin(target) is list:
        args = get_args(target)
        item = _strip_annotated(args[0]) if args else None
        if _is_entity_type(item):
            return PropertyDef(name, PropertyKind.ENTITY_LIST, item)
    raise TypeError(f"Unsupported property type for {name!r}: {annotation!r}")


class Entity(BaseModel):
    """Base for everything that travels inside an XML payload.

    Subclasses declare properties as pydantic fields typed ``str``, another
    Entity, or ``list`` of an Entity. The wire tag defaults to the snake_case
    class name and can be pinned with ``entity_name = "..."``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    entity_name: ClassVar[str] = "entity"

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if "entity_name" not in cls.__dict__:
            cls.entity_name = underscore(cls.__name__)

    @classmethod
    def class_props(cls) -> tuple[PropertyDef, ...]:
        """Return the property schema in field declaration order (cached per class)."""
        cached = _SCHEMA_CACHE.get(cls)
        if cached is None:
            cached = tuple(
                property_def_for(name, field.annotation)
                for name, field in cls.model_fields.items()
            )
            _SCHEMA_CACHE[cls] = cached
        return cached

    def to_xml(self) -> etree._Element:
        """Serialize to a detached element tagged with ``entity_name``.

        Scalars and nested entities that are None are left out; lists emit one
        element per item in order.
        """
        element = etree.Element(self.entity_name)
        for prop in self.class_props():
            value = getattr(self, prop.name)
            match prop.kind:
                case PropertyKind.SCALAR:
                    if value is not None:
                        etree.SubElement(element, prop.name).text = value
                case PropertyKind.ENTITY:
                    if value is not None:
                        element.append(value.to_xml())
                case PropertyKind.ENTITY_LIST:
                    for item in value:
                        element.append(item.to_xml())
                case _:
                    assert_never(prop.kind)
        return element
