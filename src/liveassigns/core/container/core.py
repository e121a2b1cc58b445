"""Assign operations: construction, assign, assign_new, update, changed, checkpoint.

Usage:
    container = new_component({"count": 0})
    container = assign(container, "title", "Dashboard")
    container = assign(container, {"count": 1, "open": True})
    container = assign_new(container, "user", lambda: load_user())
    container = update(container, "count", lambda n: n + 1)

    if changed(container, "count"):
        ...
    container = checkpoint(container)

Every function returns a new container; the input snapshot stays valid.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, overload

from liveassigns.core.container.models import AssignsContainer, ParentAssignsReference
from liveassigns.core.errors import InvalidAssignsError, MissingAssignError, ReservedAssignError
from liveassigns.core.producer import (
    Producer,
    UpdateFn,
    apply_transform,
    normalize_producer,
    normalize_transform,
    produce,
)
from liveassigns.core.tracker import (
    ABSENT,
    ChangeTracker,
    TrackingMode,
    from_changed_slot,
    is_changed,
    record_change,
    to_changed_slot,
)
from liveassigns.core.tracker import checkpoint as checkpoint_tracker
from liveassigns.core.types import CHANGED_KEY

if TYPE_CHECKING:
    from liveassigns.config import TrackingSettings

logger = logging.getLogger(__name__)

_NO_VALUE = object()


# Construction


def _load_settings(settings: TrackingSettings | None) -> TrackingSettings:
    if settings is not None:
        return settings
    # Late import keeps pydantic-settings out of the pure core import path
    from liveassigns.config import TrackingSettings

    return TrackingSettings()


def _validated_assigns(assigns: Mapping[str, Any] | None) -> dict[str, Any]:
    if assigns is None:
        return {}
    if not isinstance(assigns, Mapping):
        raise InvalidAssignsError(f"Expected a mapping of assigns, got {type(assigns).__name__}")
    for key in assigns:
        _validate_key(key)
        if key == CHANGED_KEY:
            raise ReservedAssignError(
                f"{CHANGED_KEY!r} holds the change tracker and cannot be an initial assign"
            )
    return dict(assigns)


def _parent_ref(parent: Mapping[str, Any] | None) -> ParentAssignsReference | None:
    if parent is None:
        return None
    if not isinstance(parent, Mapping):
        raise InvalidAssignsError(f"Expected parent assigns mapping, got {type(parent).__name__}")
    return ParentAssignsReference(parent_assigns=parent)


def _build(
    assigns: Mapping[str, Any] | None,
    mode: TrackingMode,
    parent: Mapping[str, Any] | None,
    reserved_keys: Iterable[str],
) -> AssignsContainer:
    tracker = mode.empty_tracker()
    container = AssignsContainer(
        assigns=MappingProxyType(_validated_assigns(assigns)),
        tracker=tracker,
        parent_ref=_parent_ref(parent),
        reserved_keys=frozenset(reserved_keys),
    )
    logger.debug(
        "Created container with %d assigns, tracking=%s, parent=%s",
        len(container),
        mode.value,
        parent is not None,
    )
    return container


def new_component(
    assigns: Mapping[str, Any] | None = None,
    *,
    parent: Mapping[str, Any] | None = None,
    settings: TrackingSettings | None = None,
) -> AssignsContainer:
    """Create a container for a component lifecycle.

    Initial assigns form the baseline and are not marked as changed.
    Configured reserved keys may appear in the initial assigns but cannot be
    written afterwards.

    Args:
        assigns: Initial assigns.
        parent: Resolved assigns of the parent, consulted by `assign_new`.
        settings: Tracking settings. Loaded from the environment if omitted.

    Returns:
        Container tracking with `settings.component_mode` (BooleanMarks by
        default), or Disabled when tracking is switched off.

    Raises:
        InvalidAssignsError: If assigns or parent are not string-keyed mappings.
        ReservedAssignError: If assigns contain the tracker slot.
    """
    settings = _load_settings(settings)
    mode = settings.component_mode if settings.track_changes else TrackingMode.DISABLED
    return _build(assigns, mode, parent, settings.reserved_keys)


def new_render(
    assigns: Mapping[str, Any] | None = None,
    *,
    parent: Mapping[str, Any] | None = None,
    settings: TrackingSettings | None = None,
) -> AssignsContainer:
    """Create a transient container for assigns computed inside a render pass.

    Args:
        assigns: Initial assigns.
        parent: Resolved assigns of the parent, consulted by `assign_new`.
        settings: Tracking settings. Loaded from the environment if omitted.

    Returns:
        Container tracking with `settings.render_mode` (ValueMarks by
        default), or Disabled when tracking is switched off.

    Raises:
        InvalidAssignsError: If assigns or parent are not string-keyed mappings.
        ReservedAssignError: If assigns contain the tracker slot.
    """
    settings = _load_settings(settings)
    mode = settings.render_mode if settings.track_changes else TrackingMode.DISABLED
    return _build(assigns, mode, parent, ())


def from_assigns(
    assigns: Mapping[str, Any],
    *,
    parent: Mapping[str, Any] | None = None,
) -> AssignsContainer:
    """Build a container from plain assigns carrying a `__changed__` slot.

    A missing or None slot means tracking is disabled; a mapping slot becomes
    ValueMarks with the slot's entries as baselines.

    Args:
        assigns: Plain assigns, e.g. {"key": "value", "__changed__": {}}.
        parent: Resolved assigns of the parent, consulted by `assign_new`.

    Returns:
        Container equivalent to the plain representation.

    Raises:
        InvalidAssignsError: If assigns is not a mapping or the slot is malformed.
    """
    if not isinstance(assigns, Mapping):
        raise InvalidAssignsError(f"Expected a mapping of assigns, got {type(assigns).__name__}")
    tracker = from_changed_slot(assigns.get(CHANGED_KEY))
    values = {k: v for k, v in assigns.items() if k != CHANGED_KEY}
    for key in values:
        _validate_key(key)
    return AssignsContainer(
        assigns=MappingProxyType(values),
        tracker=tracker,
        parent_ref=_parent_ref(parent),
    )


def to_assigns(container: AssignsContainer) -> dict[str, Any]:
    """Render a container as plain assigns with its `__changed__` slot.

    Returns:
        New dict holding every assign plus the tracker slot. See
        `to_changed_slot` for the slot format.
    """
    return {**container.assigns, CHANGED_KEY: to_changed_slot(container.tracker)}


# Assign


def _validate_key(key: Any) -> None:
    if not isinstance(key, str):
        raise InvalidAssignsError(f"Assign keys must be strings, got {type(key).__name__}: {key!r}")


def _validate_writable(container: AssignsContainer, key: Any) -> None:
    _validate_key(key)
    if key == CHANGED_KEY:
        raise ReservedAssignError(f"{CHANGED_KEY!r} holds the change tracker and cannot be assigned")
    if key in container.reserved_keys:
        raise ReservedAssignError(f"{key!r} is a reserved assign and cannot be set by components")


def _same_value(old: Any, new: Any) -> bool:
    """Structural equality that does not conflate 1, 1.0 and True.

    Types are compared at every level of nested mappings, lists, tuples and
    sets; other values fall back to `==`.
    """
    if old is new:
        return True
    if type(old) is not type(new):
        return False
    if isinstance(old, Mapping):
        return old.keys() == new.keys() and all(_same_value(old[k], new[k]) for k in old)
    if isinstance(old, list | tuple):
        return len(old) == len(new) and all(map(_same_value, old, new))
    if isinstance(old, set | frozenset):
        # 1, 1.0 and True hash alike, so match elements up pairwise
        return old == new and all(any(_same_value(a, b) for b in new) for a in old)
    return old == new


def _put(
    container: AssignsContainer,
    key: str,
    value: Any,
    tracker: ChangeTracker,
    parent_ref: ParentAssignsReference | None,
) -> AssignsContainer:
    return replace(
        container,
        assigns=MappingProxyType({**container.assigns, key: value}),
        tracker=tracker,
        parent_ref=parent_ref,
    )


def _force_assign(
    container: AssignsContainer,
    key: str,
    value: Any,
    parent_ref: ParentAssignsReference | None,
) -> AssignsContainer:
    """Set key and mark it changed without comparing values."""
    old = container.assigns.get(key, ABSENT)
    tracker = record_change(container.tracker, key, old)
    return _put(container, key, value, tracker, parent_ref)


def _assign_one(container: AssignsContainer, key: str, value: Any) -> AssignsContainer:
    _validate_writable(container, key)
    old = container.assigns.get(key, ABSENT)
    if old is not ABSENT and _same_value(old, value):
        return container
    return _force_assign(container, key, value, container.parent_ref)


def _pairs(values: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(values, Mapping):
        return values.items()
    if isinstance(values, str | bytes) or not isinstance(values, Iterable):
        raise InvalidAssignsError(
            f"Expected a mapping or (key, value) pairs, got {type(values).__name__}"
        )
    pairs = []
    for item in values:
        if not isinstance(item, tuple) or len(item) != 2:
            raise InvalidAssignsError(f"Expected (key, value) tuple, got {item!r}")
        pairs.append(item)
    return pairs


@overload
def assign(container: AssignsContainer, key: str, value: Any, /) -> AssignsContainer: ...


@overload
def assign(
    container: AssignsContainer,
    values: Mapping[str, Any] | Iterable[tuple[str, Any]],
    /,
) -> AssignsContainer: ...


@overload
def assign(container: AssignsContainer, /, **values: Any) -> AssignsContainer: ...


def assign(
    container: AssignsContainer,
    key_or_values: Any = _NO_VALUE,
    value: Any = _NO_VALUE,
    /,
    **kwargs: Any,
) -> AssignsContainer:
    """Set one or many assigns, marking those whose value actually changed.

    Supports three forms:
        assign(container, "key", value)
        assign(container, {"a": 1, "b": 2})     # or [("a", 1), ("b", 2)]
        assign(container, a=1, b=2)

    Bulk forms apply pairs sequentially in the given order, so each equality
    check sees the values set by earlier pairs.

    Args:
        container: Container to derive from.
        key_or_values: Key to set, or a mapping / iterable of pairs.
        value: Value for the single-key form.
        **kwargs: Keyword form of the bulk assign.

    Returns:
        New container. If every value equals the current one, the container is
        returned unchanged and nothing is marked.

    Raises:
        InvalidAssignsError: If a key is not a string or the pairs are malformed.
        ReservedAssignError: If a key is reserved.
    """
    if value is not _NO_VALUE:
        if kwargs:
            raise TypeError("assign() takes either a key and value or keyword assigns, not both")
        return _assign_one(container, key_or_values, value)

    pairs: list[tuple[Any, Any]] = []
    if key_or_values is not _NO_VALUE:
        pairs.extend(_pairs(key_or_values))
    pairs.extend(kwargs.items())

    result = container
    for key, val in pairs:
        result = _assign_one(result, key, val)
    return result


# Deferred assign


def assign_new(
    container: AssignsContainer,
    key: str,
    producer: Producer | Callable[..., Any],
) -> AssignsContainer:
    """Assign `key` only if it is not already present.

    Resolution order:
    1. Key already in the container: returned unchanged, producer not called.
    2. Key in the parent snapshot: parent value inherited and marked.
    3. Otherwise: producer is called and its result marked.

    The producer may take no arguments, or one argument receiving the
    container's current assigns (including values resolved by earlier
    `assign_new` calls in the same chain).

    Args:
        container: Container to derive from.
        key: Key to resolve.
        producer: Function computing the default value.

    Returns:
        New container with the key resolved.

    Raises:
        ArityError: If producer is not a function of arity 0 or 1.
        InvalidAssignsError: If key is not a string.
        ReservedAssignError: If key is reserved.
    """
    _validate_writable(container, key)
    normalized = normalize_producer(producer)

    if key in container.assigns:
        return container

    parent_ref = container.parent_ref
    if parent_ref is not None and key in parent_ref:
        logger.debug("assign_new resolved %r from parent assigns", key)
        value = parent_ref.parent_assigns[key]
        return _force_assign(container, key, value, parent_ref.request(key))

    logger.debug("assign_new computing %r", key)
    value = produce(normalized, container.assigns)
    return _force_assign(container, key, value, parent_ref)


# Update


def update(
    container: AssignsContainer,
    key: str,
    fn: UpdateFn | Callable[..., Any],
) -> AssignsContainer:
    """Derive a new value for an existing key from its current value.

    The function may take the old value, or the old value and the assigns as
    they were before this update. The result goes through `assign`, so an
    unchanged result leaves the container and its marks untouched.

    Args:
        container: Container to derive from.
        key: Existing key to update.
        fn: Update function of arity 1 or 2.

    Returns:
        New container.

    Raises:
        MissingAssignError: If key is not present. The key is never created.
        ArityError: If fn is not a function of arity 1 or 2.
        ReservedAssignError: If key is reserved.
    """
    _validate_writable(container, key)
    transform = normalize_transform(fn)
    if key not in container.assigns:
        raise MissingAssignError(key, container.assigns)
    new_value = apply_transform(transform, container.assigns[key], container.assigns)
    return _assign_one(container, key, new_value)


# Tracking


def changed(container: AssignsContainer | Mapping[str, Any], key: str) -> bool:
    """Check whether `key` changed since the last checkpoint.

    Args:
        container: Container, or plain assigns carrying a `__changed__` slot.
        key: Key to check.

    Returns:
        True if the key is marked, and always True when tracking is disabled.

    Raises:
        InvalidAssignsError: If given neither a container nor a mapping.
    """
    if isinstance(container, AssignsContainer):
        return is_changed(container.tracker, key)
    if isinstance(container, Mapping):
        return is_changed(from_changed_slot(container.get(CHANGED_KEY)), key)
    raise InvalidAssignsError(f"Expected assigns container or mapping, got {type(container).__name__}")


def checkpoint(container: AssignsContainer) -> AssignsContainer:
    """Clear change marks once the renderer has consumed them.

    Returns:
        Container with the same assigns and an empty tracker of the same mode.
    """
    tracker = checkpoint_tracker(container.tracker)
    if tracker is container.tracker:
        return container
    logger.debug("Checkpointed container with %d assigns", len(container))
    return replace(container, tracker=tracker)
