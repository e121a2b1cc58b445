"""Core type definitions and reserved assign keys."""

from collections.abc import Mapping
from typing import Any, TypeAlias

Key: TypeAlias = str
"""Assign keys are plain, case-sensitive strings."""

Assigns: TypeAlias = Mapping[str, Any]
"""Read-only view of a component's named values.

Insertion order is preserved and matters for attribute projection.
"""

CHANGED_KEY = "__changed__"
"""Slot holding the change tracker in the plain assigns representation."""

SLOT_KEY = "__slot__"
"""Marks assigns that belong to a named slot entry."""

INNER_BLOCK_KEY = "inner_block"
"""Holds the content block payload passed by a caller."""

BOOKKEEPING_KEYS: frozenset[str] = frozenset({CHANGED_KEY, SLOT_KEY, INNER_BLOCK_KEY})
"""Internal wiring keys, never forwarded as plain attributes."""

DEFAULT_RESERVED_KEYS: tuple[str, ...] = ("flash", "myself", "socket", "streams", "uploads")
"""Keys owned by the component runtime that authors may not assign."""
