"""Core functionalities: stateless primitives for assigns change tracking.

Architecture Note:
    core/ contains pure, stateless functions over immutable snapshots.
    Every operation returns a new value; nothing is mutated in place.
    Configuration lives in config/ and is only read by the constructors.
"""

from liveassigns.core.attributes import assigns_to_attributes
from liveassigns.core.container import (
    AssignsContainer,
    ParentAssignsReference,
    assign,
    assign_new,
    changed,
    checkpoint,
    from_assigns,
    new_component,
    new_render,
    to_assigns,
    update,
)
from liveassigns.core.errors import (
    ArityError,
    AssignsError,
    InvalidAssignsError,
    MissingAssignError,
    ReservedAssignError,
)
from liveassigns.core.producer import (
    Producer,
    Thunk,
    Transform,
    TransformWithAssigns,
    UpdateFn,
    WithAssigns,
)
from liveassigns.core.tracker import (
    ABSENT,
    BooleanMarks,
    ChangeTracker,
    Disabled,
    TrackingMode,
    ValueMarks,
    changed_keys,
    get_baseline,
)
from liveassigns.core.types import (
    BOOKKEEPING_KEYS,
    CHANGED_KEY,
    INNER_BLOCK_KEY,
    SLOT_KEY,
    Assigns,
    Key,
)

__all__ = [
    # Types
    "Assigns",
    "Key",
    "CHANGED_KEY",
    "SLOT_KEY",
    "INNER_BLOCK_KEY",
    "BOOKKEEPING_KEYS",
    # Tracker
    "ABSENT",
    "ChangeTracker",
    "Disabled",
    "BooleanMarks",
    "ValueMarks",
    "TrackingMode",
    "changed_keys",
    "get_baseline",
    # Producer
    "Producer",
    "Thunk",
    "WithAssigns",
    "UpdateFn",
    "Transform",
    "TransformWithAssigns",
    # Container
    "AssignsContainer",
    "ParentAssignsReference",
    "new_component",
    "new_render",
    "from_assigns",
    "to_assigns",
    "assign",
    "assign_new",
    "update",
    "changed",
    "checkpoint",
    # Attributes
    "assigns_to_attributes",
    # Errors
    "AssignsError",
    "MissingAssignError",
    "ArityError",
    "InvalidAssignsError",
    "ReservedAssignError",
]
