"""liveassigns: change tracking for server-rendered component assigns.

Usage:
    from liveassigns import assign, assign_new, changed, checkpoint, new_component, update

    container = new_component({"count": 0}, parent={"user": current_user})
    container = assign(container, "title", "Dashboard")
    container = assign_new(container, "user", lambda: load_user())
    container = update(container, "count", lambda n: n + 1)

    if changed(container, "count"):
        ...  # re-render the parts depending on count
    container = checkpoint(container)
"""

__version__ = "0.1.0"

# Core primitives
from liveassigns.core import (
    ABSENT,
    BOOKKEEPING_KEYS,
    CHANGED_KEY,
    INNER_BLOCK_KEY,
    SLOT_KEY,
    AssignsContainer,
    BooleanMarks,
    ChangeTracker,
    Disabled,
    ParentAssignsReference,
    Thunk,
    TrackingMode,
    Transform,
    TransformWithAssigns,
    ValueMarks,
    WithAssigns,
    assign,
    assign_new,
    assigns_to_attributes,
    changed,
    changed_keys,
    checkpoint,
    from_assigns,
    get_baseline,
    new_component,
    new_render,
    to_assigns,
    update,
)

# Errors
from liveassigns.core.errors import (
    ArityError,
    AssignsError,
    InvalidAssignsError,
    MissingAssignError,
    ReservedAssignError,
)

# Configuration
from liveassigns.config import TrackingSettings

__all__ = [
    # Version
    "__version__",
    # Containers
    "AssignsContainer",
    "ParentAssignsReference",
    "new_component",
    "new_render",
    "from_assigns",
    "to_assigns",
    # Operations
    "assign",
    "assign_new",
    "update",
    "changed",
    "checkpoint",
    "assigns_to_attributes",
    # Tracker
    "ABSENT",
    "ChangeTracker",
    "Disabled",
    "BooleanMarks",
    "ValueMarks",
    "TrackingMode",
    "changed_keys",
    "get_baseline",
    # Producers
    "Thunk",
    "WithAssigns",
    "Transform",
    "TransformWithAssigns",
    # Reserved keys
    "CHANGED_KEY",
    "SLOT_KEY",
    "INNER_BLOCK_KEY",
    "BOOKKEEPING_KEYS",
    # Errors
    "AssignsError",
    "MissingAssignError",
    "ArityError",
    "InvalidAssignsError",
    "ReservedAssignError",
    # Config
    "TrackingSettings",
]
