"""Error taxonomy.

Every error here signals a programmer mistake in component code. The engine
never catches or retries them; they surface directly to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable


class AssignsError(Exception):
    """Base class for all liveassigns errors."""

    pass


class MissingAssignError(AssignsError, KeyError):
    """Raised when `update` targets a key the container does not hold."""

    def __init__(self, key: str, available: Iterable[str] = ()) -> None:
        self.key = key
        self.available = tuple(available)
        super().__init__(key)

    def __str__(self) -> str:
        return f"assign {self.key!r} not found, available keys: {list(self.available)}"


class ArityError(AssignsError, TypeError):
    """Raised when a producer or transform has an unsupported shape."""

    pass


class InvalidAssignsError(AssignsError, TypeError):
    """Raised when assigns are not a string-keyed mapping."""

    pass


class ReservedAssignError(AssignsError, ValueError):
    """Raised when component code writes a key owned by the runtime."""

    pass
