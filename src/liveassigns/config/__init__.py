"""Configuration module using Pydantic Settings.

Provides typed configuration for change tracking with environment variable support.

Usage:
    from liveassigns.config import TrackingSettings

    settings = TrackingSettings(track_changes=False)
"""

from liveassigns.config.settings import TrackingSettings

__all__ = [
    "TrackingSettings",
]
