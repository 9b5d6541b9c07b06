"""Entity registry: canonical identifier -> Entity class; explicit registration only."""

from __future__ import annotations

import importlib
from collections.abc import Iterable, Sequence
from typing import NoReturn

from federation.entity import Entity
from federation.errors import UnknownEntityError
from federation.names import resolve_name


class EntityRegistry:
    """In-process registry keyed by the camelized wire tag of each entity."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._entities: dict[str, type[Entity]] = {}

    def register(
        self,
        entity_cls: type[Entity],
        *,
        override: bool = False,
    ) -> str:
        """Register entity_cls under resolve_name(entity_cls.entity_name).

        Args:
            entity_cls: Entity subclass to register.
            override: If True, replace existing registration.

        Returns:
            The canonical identifier the class was registered under.

        Raises:
            TypeError: If entity_cls is not an Entity subclass.
            ValueError: If the identifier is already registered and override is False.
        """
        if not (isinstance(entity_cls, type) and issubclass(entity_cls, Entity)):
            raise TypeError(f"Expected an Entity subclass, got {entity_cls!r}")
        identifier = resolve_name(entity_cls.entity_name)
        if identifier in self._entities and not override:
            raise ValueError(f"Entity already registered: {identifier!r}")
        self._entities[identifier] = entity_cls
        return identifier

    def resolve(self, identifier: str) -> type[Entity] | None:
        """Return the class registered for identifier, or None."""
        return self._entities.get(identifier)

    def get(self, identifier: str) -> type[Entity]:
        """Return the class registered for identifier. Raises if not registered.

        Args:
            identifier: Canonical type identifier (e.g. ``StatusMessage``).

        Returns:
            The registered Entity subclass.

        Raises:
            UnknownEntityError: If identifier is not registered.
        """
        entity_cls = self.resolve(identifier)
        if entity_cls is None:
            raise UnknownEntityError(
                f"Unknown entity: {identifier!r}", data={"identifier": identifier}
            )
        return entity_cls

    def identifiers(self) -> list[str]:
        """Registered identifiers, sorted."""
        return sorted(self._entities)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entities

    def __len__(self) -> int:
        return len(self._entities)


def register_entities(
    registry: EntityRegistry, entity_classes: Iterable[type[Entity]]
) -> None:
    """Register all classes; never overrides, so collisions fail loudly."""
    for entity_cls in entity_classes:
        registry.register(entity_cls, override=False)


def build_registry(entity_classes: Iterable[type[Entity]]) -> EntityRegistry:
    """Return a fresh registry holding entity_classes."""
    registry = EntityRegistry()
    register_entities(registry, entity_classes)
    return registry


def _fail(message: str) -> NoReturn:
    raise ValueError(message)


def load_entities(module_path: str) -> Sequence[type[Entity]]:
    """Load entity classes from a Python module.

    Module must export ENTITIES (a sequence of Entity subclasses).

    Args:
        module_path: Dotted module path (e.g. federation.entities).

    Returns:
        The exported entity classes, in declaration order.
    """
    try:
        mod = importlib.import_module(module_path)
    except ImportError as e:
        _fail(f"Failed to import entity module {module_path!r}: {e}")

    if not hasattr(mod, "ENTITIES"):
        _fail(f"Entity module {module_path!r} has no ENTITIES export")

    raw = mod.ENTITIES
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        _fail(
            f"ENTITIES in {module_path!r} must be a sequence, got {type(raw).__name__}"
        )
    for item in raw:
        if not (isinstance(item, type) and issubclass(item, Entity)):
            _fail(f"ENTITIES in {module_path!r} contains a non-Entity: {item!r}")
    return tuple(raw)
