"""Deterministic payload error contracts."""

from __future__ import annotations

from enum import StrEnum


class PayloadErrorCode(StrEnum):
    """Stable codes for pack/unpack failures."""

    INVALID_ARGUMENT = "invalid_argument"
    INVALID_STRUCTURE = "invalid_structure"
    UNKNOWN_ENTITY = "unknown_entity"
    SCHEMA_CYCLE = "schema_cycle"


class XmlPayloadError(RuntimeError):
    """Payload failure with stable deterministic code."""

    code: PayloadErrorCode

    def __init__(
        self,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create payload failure.

        Args:
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.data = data or {}


class InvalidArgumentError(XmlPayloadError, TypeError):
    """Raised when pack/unpack is called with the wrong kind of value."""

    code = PayloadErrorCode.INVALID_ARGUMENT


class InvalidStructureError(XmlPayloadError):
    """Raised when the XML does not resemble the <XML><post> wrapper."""

    code = PayloadErrorCode.INVALID_STRUCTURE


class UnknownEntityError(XmlPayloadError):
    """Raised when the payload tag maps to no registered entity type."""

    code = PayloadErrorCode.UNKNOWN_ENTITY


class SchemaCycleError(XmlPayloadError):
    """Raised when nested entities exceed the configured nesting depth."""

    code = PayloadErrorCode.SCHEMA_CYCLE
