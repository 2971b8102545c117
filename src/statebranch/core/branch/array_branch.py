"""Array branches: a list overlay built from a shallow working copy.

Index bookkeeping (appends, pops, inserts, sorts) does not fit a per-key
override map, so an array branch copies its base once at construction, passing
every element through ``create``. All reads and writes then use that copy.
"""

from __future__ import annotations

import logging as _logging
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any

from statebranch.core.branch.base import BranchNode, wrap
from statebranch.core.flags import Flag
from statebranch.errors import FrozenBranchError, report_violation

_logger = _logging.getLogger(__name__)


class ArrayBranch(BranchNode, MutableSequence[Any]):
    """Overlay node for a list.

    Every mutation marks the node dirty, with no no-change check. On a frozen
    node the mutating methods report a violation and do nothing, while index
    assignment and deletion are dropped silently. Reads always work.

    Args:
        base: Sequence to branch from. May itself be a branch.
    """

    __slots__ = ("_base", "_copy")

    def __init__(self, base: Sequence[Any]) -> None:
        super().__init__()
        self._base = base
        self._copy: list[Any] = [wrap(item) for item in base]

    def _origin(self) -> Sequence[Any]:
        return self._base

    def _rejects(self, operation: str) -> bool:
        if self._frozen:
            report_violation(FrozenBranchError(f"Cannot {operation} on a frozen branch"))
            return True
        return False

    # Reads

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, Flag):
            return self._read_flag(index)
        return self._copy[index]

    def __len__(self) -> int:
        return len(self._copy)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._copy)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayBranch):
            return self._copy == other._copy
        if isinstance(other, list):
            return self._copy == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # Index writes

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, Flag):
            self._write_flag(index, value)
            return
        if self._frozen:
            _logger.debug("Dropped index write on frozen branch")
            return
        if isinstance(index, slice):
            self._copy[index] = [wrap(item) for item in value]
        else:
            self._copy[index] = wrap(value)
        self._dirty = True

    def __delitem__(self, index: Any) -> None:
        if isinstance(index, Flag):
            _logger.warning("Ignoring delete of flag %s", index.name)
            return
        if self._frozen:
            _logger.debug("Dropped index delete on frozen branch")
            return
        del self._copy[index]
        self._dirty = True

    # Mutating methods

    def insert(self, index: int, value: Any) -> None:
        if self._rejects("insert"):
            return
        self._copy.insert(index, wrap(value))
        self._dirty = True

    def append(self, value: Any) -> None:
        if self._rejects("append"):
            return
        self._copy.append(wrap(value))
        self._dirty = True

    def extend(self, values: Iterable[Any]) -> None:
        if self._rejects("extend"):
            return
        # Materialize first: values may be this branch
        items = [wrap(item) for item in values]
        self._copy.extend(items)
        self._dirty = True

    def __iadd__(self, values: Iterable[Any]) -> ArrayBranch:
        self.extend(values)
        return self

    def pop(self, index: int = -1) -> Any:
        if self._rejects("pop"):
            return None
        item = self._copy.pop(index)
        self._dirty = True
        return item

    def remove(self, value: Any) -> None:
        if self._rejects("remove"):
            return
        self._copy.remove(value)
        self._dirty = True

    def clear(self) -> None:
        if self._rejects("clear"):
            return
        self._copy.clear()
        self._dirty = True

    def reverse(self) -> None:
        if self._rejects("reverse"):
            return
        self._copy.reverse()
        self._dirty = True

    def sort(self, *, key: Callable[[Any], Any] | None = None, reverse: bool = False) -> None:
        if self._rejects("sort"):
            return
        self._copy.sort(key=key, reverse=reverse)
        self._dirty = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._copy!r})"
