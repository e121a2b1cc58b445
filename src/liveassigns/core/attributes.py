"""Attribute projection: forwardable key/value pairs from resolved assigns.

Usage:
    assigns_to_attributes({"class": "btn", "inner_block": block})
    # [("class", "btn")]

    assigns_to_attributes(container, exclude=["label"])
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from liveassigns.core.container import AssignsContainer
from liveassigns.core.errors import InvalidAssignsError
from liveassigns.core.types import BOOKKEEPING_KEYS


def assigns_to_attributes(
    assigns: Mapping[str, Any] | AssignsContainer,
    exclude: Iterable[str] = (),
) -> list[tuple[str, Any]]:
    """Filter assigns down to the pairs a component may forward as attributes.

    The tracker slot and slot/content-block markers are always dropped, as is
    every key in `exclude`. Remaining pairs keep the insertion order of the
    source mapping.

    Args:
        assigns: Plain assigns mapping or a container.
        exclude: Additional keys to drop.

    Returns:
        Ordered list of (key, value) pairs.

    Raises:
        InvalidAssignsError: If assigns is neither a mapping nor a container.
    """
    if isinstance(assigns, AssignsContainer):
        assigns = assigns.assigns
    if not isinstance(assigns, Mapping):
        raise InvalidAssignsError(f"Expected a mapping of assigns, got {type(assigns).__name__}")
    if isinstance(exclude, str):
        exclude = (exclude,)

    excluded = BOOKKEEPING_KEYS | frozenset(exclude)
    return [(key, value) for key, value in assigns.items() if key not in excluded]
