"""Pure functions over change trackers.

Every function takes a tracker and returns a new one (or a query result); no
tracker is ever mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from liveassigns.core.errors import InvalidAssignsError
from liveassigns.core.tracker.models import (
    ABSENT,
    BooleanMarks,
    ChangeTracker,
    Disabled,
    TrackingMode,
    ValueMarks,
)


def record_change(tracker: ChangeTracker, key: str, old_value: Any) -> ChangeTracker:
    """Mark `key` as changed.

    Args:
        tracker: Current tracker.
        key: Key whose value changed.
        old_value: Value before the change, or ABSENT for new keys.

    Returns:
        Tracker with the key marked. Under ValueMarks the first baseline of the
        epoch wins; an existing entry is never overwritten.
    """
    match tracker:
        case Disabled():
            return tracker
        case BooleanMarks(keys=keys):
            if key in keys:
                return tracker
            return BooleanMarks(keys | {key})
        case ValueMarks(baselines=baselines):
            if key in baselines:
                return tracker
            return ValueMarks({**baselines, key: old_value})
    raise TypeError(f"Invalid change tracker: {tracker!r}")


def is_changed(tracker: ChangeTracker, key: str) -> bool:
    """Check whether `key` changed in the current epoch.

    Args:
        tracker: Tracker to query.
        key: Key to check.

    Returns:
        True if marked, and always True when tracking is disabled.
    """
    match tracker:
        case Disabled():
            return True
        case BooleanMarks(keys=keys):
            return key in keys
        case ValueMarks(baselines=baselines):
            return key in baselines
    raise TypeError(f"Invalid change tracker: {tracker!r}")


def checkpoint(tracker: ChangeTracker) -> ChangeTracker:
    """Start a new epoch: drop all marks but keep the mode.

    Args:
        tracker: Tracker whose marks were consumed.

    Returns:
        Empty tracker of the same mode. Disabled is returned as is.
    """
    if isinstance(tracker, Disabled):
        return tracker
    return tracking_mode(tracker).empty_tracker()


def tracking_mode(tracker: ChangeTracker) -> TrackingMode:
    """Get the mode tag of a tracker."""
    match tracker:
        case Disabled():
            return TrackingMode.DISABLED
        case BooleanMarks():
            return TrackingMode.BOOLEAN
        case ValueMarks():
            return TrackingMode.VALUE
    raise TypeError(f"Invalid change tracker: {tracker!r}")


def changed_keys(tracker: ChangeTracker) -> frozenset[str] | None:
    """All keys marked in the current epoch.

    Returns:
        Frozen set of keys, or None when tracking is disabled (meaning every
        key must be treated as changed).
    """
    match tracker:
        case Disabled():
            return None
        case BooleanMarks(keys=keys):
            return keys
        case ValueMarks(baselines=baselines):
            return frozenset(baselines)
    raise TypeError(f"Invalid change tracker: {tracker!r}")


def get_baseline(tracker: ChangeTracker, key: str, default: Any = ABSENT) -> Any:
    """Value `key` held at the start of the epoch.

    Only ValueMarks retain baselines. For other modes, or unmarked keys,
    `default` is returned.
    """
    if isinstance(tracker, ValueMarks):
        return tracker.baselines.get(key, default)
    return default


def to_changed_slot(tracker: ChangeTracker) -> dict[str, Any] | None:
    """Render a tracker as the plain `__changed__` slot value.

    Disabled becomes None. BooleanMarks map each key to True. ValueMarks map
    each key to its baseline, with ABSENT rendered as True since a key that
    did not exist has nothing to diff against.
    """
    match tracker:
        case Disabled():
            return None
        case BooleanMarks(keys=keys):
            return dict.fromkeys(sorted(keys), True)
        case ValueMarks(baselines=baselines):
            return {k: True if v is ABSENT else v for k, v in baselines.items()}
    raise TypeError(f"Invalid change tracker: {tracker!r}")


def from_changed_slot(slot: Mapping[str, Any] | None) -> ChangeTracker:
    """Parse a plain `__changed__` slot value into a tracker.

    Args:
        slot: None for disabled tracking, or a mapping of marked keys.

    Returns:
        Disabled for None, otherwise ValueMarks holding the slot's entries.

    Raises:
        InvalidAssignsError: If slot is neither None nor a mapping.
    """
    if slot is None:
        return Disabled()
    if isinstance(slot, Mapping):
        return ValueMarks(slot)
    raise InvalidAssignsError(f"Expected mapping or None in change slot, got {type(slot).__name__}")
