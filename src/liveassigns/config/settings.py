"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for container
construction.

Usage:
    from liveassigns.config import TrackingSettings

    # Load from environment variables (LIVEASSIGNS_*)
    settings = TrackingSettings()

    # Or override with explicit values
    settings = TrackingSettings(render_mode="boolean")
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from liveassigns.core.tracker import TrackingMode
from liveassigns.core.types import DEFAULT_RESERVED_KEYS


class TrackingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for change tracking.

    Attributes:
        track_changes: When False, new containers report every key as changed.
        component_mode: Tracker mode for component lifecycle containers.
        render_mode: Tracker mode for transient render-pass containers.
        reserved_keys: Keys owned by the runtime that components may not assign.

    Environment Variables:
        LIVEASSIGNS_TRACK_CHANGES
        LIVEASSIGNS_COMPONENT_MODE
        LIVEASSIGNS_RENDER_MODE
        LIVEASSIGNS_RESERVED_KEYS (JSON list)
    """

    model_config = SettingsConfigDict(
        env_prefix="LIVEASSIGNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    track_changes: bool = True
    component_mode: TrackingMode = TrackingMode.BOOLEAN
    render_mode: TrackingMode = TrackingMode.VALUE
    reserved_keys: tuple[str, ...] = DEFAULT_RESERVED_KEYS
