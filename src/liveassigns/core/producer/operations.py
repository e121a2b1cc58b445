"""Normalization and invocation of producers and transforms."""

from __future__ import annotations

import inspect
import math
from collections.abc import Callable, Mapping
from typing import Any

from liveassigns.core.errors import ArityError
from liveassigns.core.producer.models import (
    Producer,
    Thunk,
    Transform,
    TransformWithAssigns,
    UpdateFn,
    WithAssigns,
)

PRODUCER_ARITIES = (0, 1)
TRANSFORM_ARITIES = (1, 2)


def _positional_range(fn: Callable[..., Any]) -> tuple[int, float]:
    """Get (required, maximum) positional argument counts of a callable.

    Builtin types such as dict, set or int have no inspectable signature; they
    are treated as accepting zero or more positional arguments.

    Raises:
        ArityError: If the signature cannot be determined.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        if isinstance(fn, type):
            return (0, math.inf)
        raise ArityError(f"Cannot determine the arity of {fn!r}") from e

    required = 0
    maximum: float = 0
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            maximum += 1
            if param.default is param.empty:
                required += 1
        elif param.kind is param.VAR_POSITIONAL:
            maximum = math.inf
        elif param.kind is param.KEYWORD_ONLY and param.default is param.empty:
            # Required keyword-only arguments can never be supplied.
            return (-1, -1)
    return (required, maximum)


def _select_arity(fn: Any, supported: tuple[int, ...], role: str) -> int:
    """Pick the lowest supported arity the callable accepts.

    Raises:
        ArityError: If fn is not callable or accepts none of the arities.
    """
    if not callable(fn):
        raise ArityError(
            f"{role} must be a function of arity {' or '.join(map(str, supported))}, "
            f"got non-callable {type(fn).__name__}"
        )
    required, maximum = _positional_range(fn)
    for arity in supported:
        if required <= arity <= maximum:
            return arity
    raise ArityError(
        f"{role} must be a function of arity {' or '.join(map(str, supported))}, "
        f"got {fn!r} accepting {_describe(required, maximum)} positional argument(s)"
    )


def _describe(required: int, maximum: float) -> str:
    if required < 0:
        return "no"
    if maximum == math.inf:
        return f"{required} or more"
    if required == maximum:
        return str(required)
    return f"{required} to {int(maximum)}"


def normalize_producer(fn: Producer | Callable[..., Any]) -> Producer:
    """Convert a producer in any supported form to a Producer variant.

    Handles:
    - Thunk / WithAssigns -> passthrough
    - callable accepting no arguments -> Thunk
    - callable accepting one positional argument -> WithAssigns

    Args:
        fn: Producer variant or plain callable.

    Returns:
        Normalized Producer.

    Raises:
        ArityError: If fn is not a callable of arity 0 or 1.
    """
    if isinstance(fn, Thunk | WithAssigns):
        return fn
    arity = _select_arity(fn, PRODUCER_ARITIES, "assign_new producer")
    return Thunk(fn) if arity == 0 else WithAssigns(fn)


def normalize_transform(fn: UpdateFn | Callable[..., Any]) -> UpdateFn:
    """Convert an update function in any supported form to an UpdateFn variant.

    Handles:
    - Transform / TransformWithAssigns -> passthrough
    - callable accepting one positional argument -> Transform
    - callable accepting two positional arguments -> TransformWithAssigns

    Args:
        fn: UpdateFn variant or plain callable.

    Returns:
        Normalized UpdateFn.

    Raises:
        ArityError: If fn is not a callable of arity 1 or 2.
    """
    if isinstance(fn, Transform | TransformWithAssigns):
        return fn
    arity = _select_arity(fn, TRANSFORM_ARITIES, "update function")
    return Transform(fn) if arity == 1 else TransformWithAssigns(fn)


def produce(producer: Producer, assigns: Mapping[str, Any]) -> Any:
    """Invoke a producer.

    Args:
        producer: Normalized producer.
        assigns: Current assigns, passed to WithAssigns producers only.

    Returns:
        Produced value. Exceptions raised by the producer propagate.
    """
    match producer:
        case Thunk(fn=fn):
            return fn()
        case WithAssigns(fn=fn):
            return fn(assigns)
    raise ArityError(f"Invalid producer: {producer!r}")


def apply_transform(transform: UpdateFn, old_value: Any, assigns: Mapping[str, Any]) -> Any:
    """Invoke an update function.

    Args:
        transform: Normalized update function.
        old_value: Current value of the key being updated.
        assigns: Assigns before the update, passed to TransformWithAssigns only.

    Returns:
        New value. Exceptions raised by the transform propagate.
    """
    match transform:
        case Transform(fn=fn):
            return fn(old_value)
        case TransformWithAssigns(fn=fn):
            return fn(old_value, assigns)
    raise ArityError(f"Invalid update function: {transform!r}")
