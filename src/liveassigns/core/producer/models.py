"""Producer and transform shapes.

`assign_new` and `update` accept functions of two arities each. Rather than
inspecting callables on every call, the engine works on these closed sum
types and dispatches on the variant.

Usage:
    assign_new(container, "user", Thunk(load_user))
    assign_new(container, "greeting", WithAssigns(lambda a: f"Hi {a['name']}"))
    update(container, "count", Transform(lambda n: n + 1))
    update(container, "label", TransformWithAssigns(lambda old, a: f"{old} {a['suffix']}"))

Plain callables are accepted as well and normalized once at the call boundary
(see `liveassigns.core.producer.operations`).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Thunk:
    """Producer taking no arguments."""

    fn: Callable[[], Any]


@dataclass(frozen=True, slots=True)
class WithAssigns:
    """Producer receiving the container's current assigns."""

    fn: Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True, slots=True)
class Transform:
    """Update function receiving the old value."""

    fn: Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class TransformWithAssigns:
    """Update function receiving the old value and the pre-update assigns."""

    fn: Callable[[Any, Mapping[str, Any]], Any]


Producer = Thunk | WithAssigns
UpdateFn = Transform | TransformWithAssigns
