"""Producer functionality: arity variants and their normalization."""

from liveassigns.core.producer.models import (
    Producer,
    Thunk,
    Transform,
    TransformWithAssigns,
    UpdateFn,
    WithAssigns,
)
from liveassigns.core.producer.operations import (
    apply_transform,
    normalize_producer,
    normalize_transform,
    produce,
)

__all__ = [
    # Models
    "Producer",
    "Thunk",
    "WithAssigns",
    "UpdateFn",
    "Transform",
    "TransformWithAssigns",
    # Operations
    "normalize_producer",
    "normalize_transform",
    "produce",
    "apply_transform",
]
