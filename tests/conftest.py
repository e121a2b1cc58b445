"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from liveassigns import (
    TrackingSettings,
    assign,
    checkpoint,
    from_assigns,
    new_component,
    new_render,
)


@pytest.fixture
def settings():
    """Default settings, isolated from the environment and .env files."""
    return TrackingSettings(_env_file=None)


@pytest.fixture
def component(settings):
    """Empty component container with boolean change marks."""
    return new_component(settings=settings)


@pytest.fixture
def render(settings):
    """Render container holding a key and a nested map, with value marks."""
    return new_render({"key": "value", "map": {"foo": "bar"}}, settings=settings)


@pytest.fixture
def untracked():
    """Plain assigns with tracking disabled (nil change slot)."""
    return from_assigns({"key": "value", "map": {"foo": "bar"}, "__changed__": None})


@pytest.fixture
def checkpointed(component):
    """Component holding {"key": "value", "key2": "another"} with no marks."""
    return checkpoint(assign(component, key="value", key2="another"))
