"""Assigns container models.

Usage:
    container = AssignsContainer(assigns={"title": "Home"}, tracker=BooleanMarks())
    container["title"]          # "Home"
    "title" in container        # True

Containers are immutable snapshots. Use the functions in
`liveassigns.core.container.core` to derive new ones.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from liveassigns.core.tracker import ChangeTracker, Disabled


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    # Proxies may wrap a dict the caller still holds, so always copy
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class ParentAssignsReference:
    """Read-only snapshot of an ancestor's resolved assigns.

    Attributes:
        parent_assigns: The ancestor's assigns, copied at construction.
        requested_keys: Keys the child has resolved from the ancestor so far.
    """

    parent_assigns: Mapping[str, Any]
    requested_keys: frozenset[str] = frozenset()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parent_assigns", _freeze(self.parent_assigns))

    def __contains__(self, key: object) -> bool:
        return key in self.parent_assigns

    def request(self, key: str) -> ParentAssignsReference:
        """Record that the child resolved `key` from this snapshot."""
        if key in self.requested_keys:
            return self
        return ParentAssignsReference(self.parent_assigns, self.requested_keys | {key})


@dataclass(frozen=True, slots=True)
class AssignsContainer:
    """Assigns paired with their change tracker.

    Attributes:
        assigns: Read-only key/value mapping, in insertion order.
        tracker: Change marks for the current epoch.
        parent_ref: Ancestor snapshot consulted by `assign_new`, if any.
        reserved_keys: Keys owned by the runtime that may not be written.
    """

    assigns: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    tracker: ChangeTracker = field(default_factory=Disabled)
    parent_ref: ParentAssignsReference | None = None
    reserved_keys: frozenset[str] = frozenset()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "assigns", _freeze(self.assigns))

    def __getitem__(self, key: str) -> Any:
        return self.assigns[key]

    def __contains__(self, key: object) -> bool:
        return key in self.assigns

    def __iter__(self) -> Iterator[str]:
        return iter(self.assigns)

    def __len__(self) -> int:
        return len(self.assigns)

    def get(self, key: str, default: Any = None) -> Any:
        """Get an assign, or `default` if absent."""
        return self.assigns.get(key, default)
