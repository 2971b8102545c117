"""Hidden keys answered by every branch node.

Flags live in their own key space: a caller's mapping keys or list indices can
never be a ``Flag``, so reading ``node[Flag.DIRTY]`` cannot collide with data.
"""

from __future__ import annotations

from enum import Enum, auto


class Flag(Enum):
    """Queries a branch node answers through its item interface."""

    BRANCH = auto()  # Always True on a node
    FROZEN = auto()  # Writable: assigning True freezes the node
    DIRTY = auto()  # True once the node itself was written to
    EQUALS = auto()  # Effective identity used by equals()
