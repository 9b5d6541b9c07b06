"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from federation.registry import EntityRegistry, build_registry
from tests.unit.fixtures import TEST_ENTITIES


@pytest.fixture
def registry() -> EntityRegistry:
    """Registry holding the test entity types."""
    return build_registry(TEST_ENTITIES)
