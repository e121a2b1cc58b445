"""Tests for tracking settings.

Why these tests exist:
- Constructors pick tracker modes from settings
- Environment variables must override defaults
"""

import pytest
from pydantic import ValidationError

from liveassigns import TrackingMode, TrackingSettings


def test_defaults():
    settings = TrackingSettings(_env_file=None)
    assert settings.track_changes is True
    assert settings.component_mode is TrackingMode.BOOLEAN
    assert settings.render_mode is TrackingMode.VALUE
    assert settings.reserved_keys == ("flash", "myself", "socket", "streams", "uploads")


def test_explicit_values():
    settings = TrackingSettings(_env_file=None, render_mode="boolean", reserved_keys=["socket"])
    assert settings.render_mode is TrackingMode.BOOLEAN
    assert settings.reserved_keys == ("socket",)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LIVEASSIGNS_TRACK_CHANGES", "false")
    monkeypatch.setenv("LIVEASSIGNS_RENDER_MODE", "disabled")
    monkeypatch.setenv("LIVEASSIGNS_RESERVED_KEYS", '["socket", "myself"]')

    settings = TrackingSettings(_env_file=None)
    assert settings.track_changes is False
    assert settings.render_mode is TrackingMode.DISABLED
    assert settings.reserved_keys == ("socket", "myself")


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LIVEASSIGNS_COMPONENT_MODE=value\n")
    settings = TrackingSettings(_env_file=env_file)
    assert settings.component_mode is TrackingMode.VALUE


def test_invalid_mode_rejected():
    with pytest.raises(ValidationError):
        TrackingSettings(_env_file=None, component_mode="sometimes")


def test_settings_are_frozen():
    settings = TrackingSettings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.track_changes = False
