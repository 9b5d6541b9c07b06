"""Federation payload config models and loading helpers."""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from federation.reconstruct import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class PayloadSettings(BaseModel):
    """Pack/unpack limits."""

    model_config = ConfigDict(extra="forbid")

    max_nesting_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)


class LoggingSettings(BaseModel):
    """Logging configuration for the CLI."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = LogLevel.INFO


class FederationConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    payload: PayloadSettings = PayloadSettings()
    logging: LoggingSettings = LoggingSettings()


class ConfigError(RuntimeError):
    """Raised when config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError("Invalid config payload: root must be an object")
    return payload


def load_config(path: Path) -> FederationConfig:
    """Load config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config, or defaults when file does not exist.

    Raises:
        ConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return FederationConfig()
    payload = _decode_config_payload(path)
    try:
        return FederationConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config payload: {exc}") from exc
