"""Container functionality: assigns snapshots and the operations deriving them."""

from liveassigns.core.container.core import (
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
from liveassigns.core.container.models import AssignsContainer, ParentAssignsReference

__all__ = [
    # Models
    "AssignsContainer",
    "ParentAssignsReference",
    # Construction
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
]
