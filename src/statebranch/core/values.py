"""Value classification shared by the branch nodes and the query layer."""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence
from typing import Any


def is_composite(value: Any) -> bool:
    """Check whether a value can be branched.

    Mappings branch as objects, mutable sequences (lists) as arrays. Strings,
    bytes, bytearrays, tuples, numbers and arbitrary objects are scalars.
    """
    if isinstance(value, bytearray):
        return False
    return isinstance(value, Mapping | MutableSequence)


def same_value(a: Any, b: Any) -> bool:
    """Check whether two values are the same for change detection.

    Composites are compared by identity only. Scalars are the same when they
    have the same type and compare equal, so ``1`` and ``True`` differ.
    """
    if a is b:
        return True
    if type(a) is not type(b) or is_composite(a):
        return False
    return (a == b) is True
