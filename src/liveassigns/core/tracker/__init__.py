"""Change tracker functionality: tracker variants and pure operations."""

from liveassigns.core.tracker.models import (
    ABSENT,
    Absent,
    BooleanMarks,
    ChangeTracker,
    Disabled,
    TrackingMode,
    ValueMarks,
)
from liveassigns.core.tracker.operations import (
    changed_keys,
    checkpoint,
    from_changed_slot,
    get_baseline,
    is_changed,
    record_change,
    to_changed_slot,
    tracking_mode,
)

__all__ = [
    # Models
    "ABSENT",
    "Absent",
    "ChangeTracker",
    "Disabled",
    "BooleanMarks",
    "ValueMarks",
    "TrackingMode",
    # Operations
    "record_change",
    "is_changed",
    "checkpoint",
    "tracking_mode",
    "changed_keys",
    "get_baseline",
    "to_changed_slot",
    "from_changed_slot",
]
