"""Test-only entity types. Not part of the package API."""

from __future__ import annotations

from pydantic import Field

from federation.entity import Entity
from federation.validation import Guid


class SampleEntity(Entity):
    test: str


class OtherEntity(Entity):
    asdf: str


class NestedEntity(Entity):
    asdf: str
    test: SampleEntity | None = None
    multi: list[OtherEntity] = Field(default_factory=list)


class DefaultEntity(Entity):
    test1: str | None = None
    test2: str = "default"


class GuidEntity(Entity):
    guid: Guid


class TreeNode(Entity):
    """Self-referencing type; only the depth limit stops hostile nesting."""

    label: str
    children: list[TreeNode] = Field(default_factory=list)


class NamespacedEntity(Entity):
    entity_name = "ns/sub_type"

    value: str


TEST_ENTITIES = (
    SampleEntity,
    OtherEntity,
    NestedEntity,
    DefaultEntity,
    GuidEntity,
    TreeNode,
)

# Exports for load_entities tests.
ENTITIES = TEST_ENTITIES
