"""Typer CLI: inspect, unpack, and pack federation XML payloads."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from federation.config import ConfigError, FederationConfig, LogLevel, load_config
from federation.errors import XmlPayloadError
from federation.names import resolve_name
from federation.registry import EntityRegistry, build_registry, load_entities
from federation.xml_io import parse_xml, to_xml_bytes
from federation.xml_payload import XmlPayload, payload_element, payload_identifier

DEFAULT_ENTITIES_MODULE = "federation.entities"
DEFAULT_CONFIG_PATH = Path("federation.yaml")

app = typer.Typer(no_args_is_help=True)
console = Console()

_LOGGING_CONFIGURED = False

EntitiesOption = Annotated[
    str,
    typer.Option(
        "--entities",
        help="Dotted module path exporting ENTITIES.",
    ),
]
ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        dir_okay=False,
        help="YAML or JSON config file. Defaults apply when it does not exist.",
    ),
]
PayloadFile = Annotated[
    Path,
    typer.Argument(exists=True, file_okay=True, dir_okay=False, readable=True),
]


def configure_logging(level: LogLevel) -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def _fail(message: str) -> typer.Exit:
    console.print(message, style="bold red", markup=False, highlight=False)
    return typer.Exit(code=1)


def _load_config(path: Path) -> FederationConfig:
    try:
        config = load_config(path)
    except ConfigError as exc:
        raise _fail(str(exc)) from exc
    configure_logging(config.logging.level)
    return config


def _load_registry(module_path: str) -> EntityRegistry:
    try:
        return build_registry(load_entities(module_path))
    except ValueError as exc:
        raise _fail(str(exc)) from exc


@app.command("inspect")
def inspect_payload(
    file: PayloadFile,
    entities: EntitiesOption = DEFAULT_ENTITIES_MODULE,
) -> None:
    """Check the wrapper structure and show which entity type it carries."""
    registry = _load_registry(entities)
    try:
        data = payload_element(parse_xml(file.read_bytes()))
    except XmlPayloadError as exc:
        raise _fail(f"Invalid payload: {exc}") from exc

    identifier = payload_identifier(data)
    table = Table(title="Payload")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("wire tag", data.tag)
    table.add_row("entity type", identifier)
    table.add_row("registered", "yes" if identifier in registry else "no")
    table.add_row("children", str(len(data)))
    console.print(table)


@app.command("unpack")
def unpack_payload(
    file: PayloadFile,
    entities: EntitiesOption = DEFAULT_ENTITIES_MODULE,
    config: ConfigOption = DEFAULT_CONFIG_PATH,
) -> None:
    """Reconstruct the entity in FILE and print it as JSON."""
    settings = _load_config(config)
    payload = XmlPayload(_load_registry(entities), settings.payload)
    try:
        entity = payload.unpack(parse_xml(file.read_bytes()))
    except XmlPayloadError as exc:
        raise _fail(f"Invalid payload: {exc}") from exc
    except ValidationError as exc:
        raise _fail(f"Entity rejected: {exc}") from exc
    document = {
        "entity_type": resolve_name(entity.entity_name),
        "properties": entity.model_dump(mode="json"),
    }
    typer.echo(json.dumps(document, indent=2, sort_keys=True))


@app.command("pack")
def pack_payload(
    file: PayloadFile,
    type_name: Annotated[
        str,
        typer.Option("--type", help="Entity type identifier, e.g. StatusMessage."),
    ],
    entities: EntitiesOption = DEFAULT_ENTITIES_MODULE,
    pretty: Annotated[bool, typer.Option("--pretty", help="Indent output.")] = False,
) -> None:
    """Build the entity described by the JSON object in FILE and wrap it."""
    registry = _load_registry(entities)
    try:
        properties = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise _fail(f"Invalid JSON: {exc}") from exc
    try:
        entity = registry.get(type_name).model_validate(properties)
    except XmlPayloadError as exc:
        raise _fail(str(exc)) from exc
    except ValidationError as exc:
        raise _fail(f"Entity rejected: {exc}") from exc
    typer.echo(to_xml_bytes(XmlPayload(registry).pack(entity), pretty=pretty).decode())


def main() -> None:
    """Entrypoint for the federation-payload console script."""
    app()
