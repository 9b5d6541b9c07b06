"""Schema-driven reconstruction of entities from untrusted XML elements."""

from __future__ import annotations

from typing import TypeVar, assert_never

from lxml import etree

from federation.entity import Entity
from federation.errors import SchemaCycleError
from federation.properties import PropertyKind

DEFAULT_MAX_DEPTH = 32
# Each nesting level costs a populate_entity frame; stays well below the interpreter
# recursion limit and matches libxml2's default tree depth limit.
MAX_DEPTH_LIMIT = 256

# XPath string-value: all descendant text, comments excluded; "" for an empty element.
_STRING_VALUE = etree.XPath("string()")

E = TypeVar("E", bound=Entity)


def _first_child(element: etree._Element, tag: str) -> etree._Element | None:
    return next(element.iterchildren(tag), None)


def _text_content(element: etree._Element) -> str:
    return str(_STRING_VALUE(element))


def populate_entity(
    entity_cls: type[E],
    element: etree._Element,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> E:
    """Construct entity_cls from element, recursing into nested entities.

    Properties with no matching child are left out of the data handed to the
    constructor; entity lists are always present, possibly empty. Whether the
    result is acceptable is decided by the entity's own validation.

    Args:
        entity_cls: Entity type the element is believed to represent.
        element: Element holding the entity's properties as children.
        max_depth: Deepest nesting level allowed below the root entity.
        depth: Nesting level of element (0 for the payload root).

    Returns:
        New entity instance.

    Raises:
        SchemaCycleError: If nesting goes deeper than max_depth.
        pydantic.ValidationError: If entity_cls rejects the collected data.
    """
    if depth > max_depth:
        raise SchemaCycleError(
            f"Entity nesting exceeds max depth {max_depth} at {entity_cls.__name__}",
            data={"max_depth": max_depth, "entity": entity_cls.__name__},
        )
    data: dict[str, object] = {}
    for prop in entity_cls.class_props():
        match prop.kind:
            case PropertyKind.SCALAR:
                child = _first_child(element, prop.name)
                if child is not None:
                    data[prop.name] = _text_content(child)
            case PropertyKind.ENTITY:
                nested_cls = prop.nested_type()
                child = _first_child(element, nested_cls.entity_name)
                if child is not None:
                    data[prop.name] = populate_entity(
                        nested_cls, child, max_depth=max_depth, depth=depth + 1
                    )
            case PropertyKind.ENTITY_LIST:
                nested_cls = prop.nested_type()
                data[prop.name] = [
                    populate_entity(nested_cls, child, max_depth=max_depth, depth=depth + 1)
                    for child in element.iterchildren(nested_cls.entity_name)
                ]
            case _:
                assert_never(prop.kind)
    return entity_cls.model_validate(data)
