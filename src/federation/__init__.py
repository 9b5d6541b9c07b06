"""Federation payloads: wrap entities in <XML><post> and rebuild them from XML."""

from federation.config import (
    ConfigError,
    FederationConfig,
    LoggingSettings,
    LogLevel,
    PayloadSettings,
    load_config,
)
from federation.entity import Entity, property_def_for
from federation.errors import (
    InvalidArgumentError,
    InvalidStructureError,
    PayloadErrorCode,
    SchemaCycleError,
    UnknownEntityError,
    XmlPayloadError,
)
from federation.names import NAMESPACE_SEPARATOR, resolve_name, underscore
from federation.properties import PropertyDef, PropertyKind
from federation.reconstruct import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, populate_entity
from federation.registry import (
    EntityRegistry,
    build_registry,
    load_entities,
    register_entities,
)
from federation.validation import Guid, validate_guid
from federation.xml_io import parse_xml, to_xml_bytes
from federation.xml_payload import (
    XmlPayload,
    pack,
    payload_element,
    payload_identifier,
    unpack,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "NAMESPACE_SEPARATOR",
    "ConfigError",
    "Entity",
    "EntityRegistry",
    "FederationConfig",
    "Guid",
    "InvalidArgumentError",
    "InvalidStructureError",
    "LogLevel",
    "LoggingSettings",
    "PayloadErrorCode",
    "PayloadSettings",
    "PropertyDef",
    "PropertyKind",
    "SchemaCycleError",
    "UnknownEntityError",
    "XmlPayload",
    "XmlPayloadError",
    "build_registry",
    "load_config",
    "load_entities",
    "pack",
    "parse_xml",
    "payload_element",
    "payload_identifier",
    "populate_entity",
    "property_def_for",
    "register_entities",
    "resolve_name",
    "to_xml_bytes",
    "underscore",
    "unpack",
    "validate_guid",
]
