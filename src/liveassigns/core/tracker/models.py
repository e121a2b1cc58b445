"""Change tracker models: the three tracking representations.

A tracker is a tagged variant rather than a class hierarchy. Operations in
`liveassigns.core.tracker.operations` switch on the variant.

Usage:
    tracker = TrackingMode.VALUE.empty_tracker()   # ValueMarks()
    tracker = BooleanMarks(frozenset({"title"}))
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any


class Absent(Enum):
    """Sentinel type for "no value"."""

    ABSENT = auto()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT
"""Baseline recorded for keys that did not exist at the start of an epoch."""


@dataclass(frozen=True, slots=True)
class Disabled:
    """Tracking turned off. Every key reports as changed."""

    pass


@dataclass(frozen=True, slots=True)
class BooleanMarks:
    """Keys changed since the last checkpoint, without their prior values."""

    keys: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class ValueMarks:
    """Changed keys mapped to the value they held when the epoch started.

    Only the first change in an epoch records a baseline; later changes to the
    same key leave it untouched so a differ can compare baseline vs. current.
    """

    baselines: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    # Baselines hold arbitrary, possibly unhashable values
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "baselines", MappingProxyType(dict(self.baselines)))


ChangeTracker = Disabled | BooleanMarks | ValueMarks


class TrackingMode(Enum):
    """Names the tracker variants, e.g. for configuration."""

    DISABLED = "disabled"
    BOOLEAN = "boolean"
    VALUE = "value"

    def empty_tracker(self) -> ChangeTracker:
        """Build a tracker of this mode with no marks.

        Returns:
            Fresh tracker at the start of an epoch.
        """
        trackers: dict[TrackingMode, ChangeTracker] = {
            TrackingMode.DISABLED: Disabled(),
            TrackingMode.BOOLEAN: BooleanMarks(),
            TrackingMode.VALUE: ValueMarks(),
        }
        return trackers[self]
