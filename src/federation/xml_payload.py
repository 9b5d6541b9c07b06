"""Wrap entities in the <XML><post> payload structure and unwrap them again.

The wrapper looks like so::

    <XML>
      <post>
        {entity xml}
      </post>
    </XML>

The ``post`` element is there for historic reasons. Only the first element
inside ``post`` is read.
"""

from __future__ import annotations

import logging

from lxml import etree

from federation.config import PayloadSettings
from federation.entity import Entity
from federation.errors import (
    InvalidArgumentError,
    InvalidStructureError,
    UnknownEntityError,
)
from federation.names import resolve_name
from federation.reconstruct import DEFAULT_MAX_DEPTH, populate_entity
from federation.registry import EntityRegistry

_LOGGER = logging.getLogger(__name__)

WRAPPER_TAG = "XML"
POST_TAG = "post"


def _is_element(node: object) -> bool:
    # Comments and processing instructions are _Element subclasses with non-str tags.
    return etree.iselement(node) and isinstance(node.tag, str)


def pack(entity: Entity) -> etree._Element:
    """Serialize entity and wrap it; the fragment is moved into the new tree.

    Args:
        entity: Entity to wrap.

    Returns:
        The ``XML`` root element.

    Raises:
        InvalidArgumentError: If entity is not an Entity instance.
    """
    if not isinstance(entity, Entity):
        raise InvalidArgumentError(
            f"pack expects an Entity, got {type(entity).__name__}",
            data={"type": type(entity).__name__},
        )
    entity_xml = entity.to_xml()
    wrap = etree.Element(WRAPPER_TAG)
    wrap_post = etree.SubElement(wrap, POST_TAG)
    wrap_post.append(entity_xml)
    _LOGGER.debug("Packed %s entity", entity.entity_name)
    return wrap


def payload_element(xml: etree._Element) -> etree._Element:
    """Check the wrapper shape and return the first element inside ``post``.

    Raises:
        InvalidStructureError: If the tag is not XML, post is missing, or post
            holds no element.
    """
    if xml.tag != WRAPPER_TAG:
        raise InvalidStructureError(
            f"Expected <{WRAPPER_TAG}> root, got <{xml.tag}>", data={"tag": xml.tag}
        )
    wrap_post = xml.find(POST_TAG)
    if wrap_post is None:
        raise InvalidStructureError(f"Missing <{POST_TAG}> element")
    data = next(wrap_post.iterchildren(etree.Element), None)
    if data is None:
        raise InvalidStructureError(f"Empty <{POST_TAG}> element")
    return data


def payload_identifier(data: etree._Element) -> str:
    """Canonical type identifier for a payload element, ignoring its namespace."""
    return resolve_name(etree.QName(data).localname)


def unpack(
    xml: etree._Element,
    registry: EntityRegistry,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Entity:
    """Extract the entity XML from the wrapper and reconstruct the entity.

    Args:
        xml: Payload root element.
        registry: Registry used to map the payload tag to an entity class.
        max_depth: Deepest entity nesting accepted below the payload.

    Returns:
        Re-constructed entity instance.

    Raises:
        InvalidArgumentError: If xml is not an element node.
        InvalidStructureError: If xml does not look like the wrapper.
        UnknownEntityError: If the payload tag maps to no registered entity.
        SchemaCycleError: If nesting exceeds max_depth.
    """
    if not _is_element(xml):
        raise InvalidArgumentError(
            f"unpack expects an XML element, got {type(xml).__name__}",
            data={"type": type(xml).__name__},
        )
    data = payload_element(xml)
    identifier = payload_identifier(data)
    entity_cls = registry.resolve(identifier)
    if entity_cls is None:
        raise UnknownEntityError(
            f"Unknown entity: {identifier!r}", data={"identifier": identifier}
        )
    _LOGGER.debug("Unpacking %s payload", identifier)
    return populate_entity(entity_cls, data, max_depth=max_depth)


class XmlPayload:
    """Registry-bound pack/unpack pair."""

    def __init__(
        self, registry: EntityRegistry, settings: PayloadSettings | None = None
    ) -> None:
        """Bind registry and settings (defaults when None)."""
        self._registry = registry
        self._settings = settings or PayloadSettings()

    @property
    def registry(self) -> EntityRegistry:
        """Registry used to resolve payload types."""
        return self._registry

    def pack(self, entity: Entity) -> etree._Element:
        """Wrap entity; see module-level pack.

        Args:
            entity: Entity to wrap.

        Returns:
            The ``XML`` root element.
        """
        return pack(entity)

    def unpack(self, xml: etree._Element) -> Entity:
        """Reconstruct the wrapped entity with the configured nesting limit.

        Args:
            xml: Payload root element.

        Returns:
            Re-constructed entity instance.

        Raises:
            XmlPayloadError: On invalid argument, structure, type, or nesting.
        """
        return unpack(
            xml, self._registry, max_depth=self._settings.max_nesting_depth
        )
