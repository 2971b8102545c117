"""Branch creation: picks the node variant for a value."""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence
from typing import TypeVar

from statebranch.core.branch.array_branch import ArrayBranch
from statebranch.core.branch.object_branch import ObjectBranch
from statebranch.core.types import Branched

T = TypeVar("T")


def create(value: T) -> Branched[T]:
    """Create a new branch over a value.

    Mappings become ObjectBranch nodes, lists become ArrayBranch nodes, and
    scalars are returned unchanged. Every call returns a new node, even for a
    value that is already a branch.

    Args:
        value: State to branch from. It is never mutated.

    Returns:
        New branch, or the value itself when it is not composite.
    """
    if isinstance(value, Mapping):
        return ObjectBranch(value)  # type: ignore[return-value]
    if isinstance(value, MutableSequence) and not isinstance(value, bytearray):
        return ArrayBranch(value)  # type: ignore[return-value]
    return value
