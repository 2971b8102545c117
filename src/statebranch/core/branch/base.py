"""State shared by both branch variants: dirty/frozen flags and the flag protocol."""

from __future__ import annotations

import logging as _logging
from typing import Any

from statebranch.core.flags import Flag

_logger = _logging.getLogger(__name__)


def wrap(value: Any) -> Any:
    """Branch a value if it is composite, pass it through otherwise."""
    # Late import to avoid circular dependency
    from statebranch.core.branch.factory import create

    return create(value)


class BranchNode:
    """Base class for branch nodes.

    Subclasses store their overlay and report the value they were built from
    through ``_origin``.
    """

    __slots__ = ("_dirty", "_frozen")

    def __init__(self) -> None:
        self._dirty = False
        self._frozen = False

    def _origin(self) -> Any:
        """Return the value this node was created from."""
        raise NotImplementedError

    def _read_flag(self, flag: Flag) -> Any:
        if flag is Flag.BRANCH:
            return True
        if flag is Flag.FROZEN:
            return self._frozen
        if flag is Flag.DIRTY:
            return self._dirty

        # Flag.EQUALS: a clean node stands for whatever it was created from
        if self._dirty:
            return self
        origin = self._origin()
        if isinstance(origin, BranchNode):
            return origin._read_flag(Flag.EQUALS)
        return origin

    def _write_flag(self, flag: Flag, value: Any) -> None:
        if flag is not Flag.FROZEN:
            _logger.warning("Ignoring write to read-only flag %s", flag.name)
            return
        if value:
            self._frozen = True
        elif self._frozen:
            _logger.warning("Frozen branches cannot be unfrozen")
