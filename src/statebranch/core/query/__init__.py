"""Query functionality: stateless helpers reading branch flags."""

from statebranch.core.query.operations import (
    effective_identity,
    equals,
    freeze,
    has_changed,
    is_branch,
    is_dirty,
    is_frozen,
)

__all__ = [
    "is_branch",
    "freeze",
    "is_frozen",
    "is_dirty",
    "effective_identity",
    "equals",
    "has_changed",
]
