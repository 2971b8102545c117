"""Query operations over branches: flags, freezing, equality and change detection."""

from __future__ import annotations

import logging as _logging
from collections.abc import Iterator, Mapping
from typing import Any

from statebranch.core.branch import BranchNode
from statebranch.core.flags import Flag
from statebranch.core.values import is_composite, same_value
from statebranch.errors import InvalidBranchError, report_violation

_logger = _logging.getLogger(__name__)


def is_branch(target: Any) -> bool:
    """Return True if target was created by ``create``."""
    if not is_composite(target) or not isinstance(target, BranchNode):
        return False
    return bool(target[Flag.BRANCH])


def _children(target: Any) -> Iterator[Any]:
    # Reading through the node materializes children that were never read
    if isinstance(target, Mapping):
        return iter(target.values())
    return iter(target)


def freeze(target: Any, deep: bool = False) -> None:
    """Freeze a branch so it no longer accepts changes.

    Freezing is permanent. Non-branch values are reported as a violation and
    left alone; check ``is_frozen`` afterwards if the outcome matters.

    Args:
        target: Branch to freeze.
        deep: Also freeze every branch reachable through the target's keys.
    """
    if not is_branch(target):
        report_violation(
            InvalidBranchError(f"Non-branch values cannot be frozen: {type(target).__name__}")
        )
        return

    target[Flag.FROZEN] = True

    if deep:
        _logger.debug("Deep-freezing %s", type(target).__name__)
        for child in _children(target):
            if is_branch(child):
                freeze(child, deep)


def is_frozen(target: Any) -> bool:
    """Return True if target is a frozen branch."""
    if not is_branch(target):
        return False
    return bool(target[Flag.FROZEN])


def is_dirty(target: Any) -> bool:
    """Return True if target is a branch that was itself written to.

    Changes inside child branches do not count; see ``has_changed``.
    """
    if not is_branch(target):
        return False
    return bool(target[Flag.DIRTY])


def effective_identity(target: Any) -> Any:
    """Return the value a branch stands for in ``equals``.

    A clean branch stands for the value it was created from, a dirty branch
    for itself. Non-branches stand for themselves.
    """
    if not is_branch(target):
        return target
    return target[Flag.EQUALS]


def equals(first: Any, second: Any) -> bool:
    """Return True if both values are based on the same state and neither has changed.

    This compares identities, never contents: two branches over equal but
    distinct mappings are not equal.
    """
    return same_value(effective_identity(first), effective_identity(second))


def has_changed(target: Any) -> bool:
    """Return True if anything in the branch changed since it was created.

    Walks the visible keys recursively. Children that were never read cannot
    have been written to, so they never report a change.

    Args:
        target: Value to check.

    Returns:
        True if the branch or any branch below it is dirty. False for
        non-branches.
    """
    if not is_branch(target):
        return False
    if is_dirty(target):
        return True
    return any(has_changed(child) for child in _children(target))
