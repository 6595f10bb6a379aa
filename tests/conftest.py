"""Shared fixtures for adaptivecards tests."""

from __future__ import annotations

import pytest

from adaptivecards import (
    CardObjectRegistry,
    GlobalRegistry,
    SerializationContext,
    Versions,
    populate_with_default_actions,
    populate_with_default_elements,
)


@pytest.fixture(autouse=True)
def _reset_global_registry():
    """Keep changes to the shared registries from leaking between tests."""
    GlobalRegistry.reset()
    yield
    GlobalRegistry.reset()


@pytest.fixture
def element_registry() -> CardObjectRegistry:
    registry = CardObjectRegistry()
    populate_with_default_elements(registry)
    return registry


@pytest.fixture
def action_registry() -> CardObjectRegistry:
    registry = CardObjectRegistry()
    populate_with_default_actions(registry)
    return registry


@pytest.fixture
def context(element_registry, action_registry) -> SerializationContext:
    return SerializationContext(
        target_version=Versions.latest,
        element_registry=element_registry,
        action_registry=action_registry,
    )
