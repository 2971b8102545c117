"""Core functionalities: branch nodes and the stateless queries over them.

Architecture Note:
    core/branch/ holds the stateful overlay nodes; core/query/ holds pure
    functions that only read node flags. Configuration and violation reporting
    live outside core/, in config/ and errors.py.
"""

from statebranch.core.branch import (
    ArrayBranch,
    BranchNode,
    ObjectBranch,
    PropertyDescriptor,
    create,
)
from statebranch.core.flags import Flag
from statebranch.core.query import (
    effective_identity,
    equals,
    freeze,
    has_changed,
    is_branch,
    is_dirty,
    is_frozen,
)
from statebranch.core.types import Branched
from statebranch.core.values import is_composite, same_value

__all__ = [
    # Types
    "Branched",
    "Flag",
    # Values
    "is_composite",
    "same_value",
    # Branch
    "create",
    "BranchNode",
    "ObjectBranch",
    "ArrayBranch",
    "PropertyDescriptor",
    # Query
    "is_branch",
    "freeze",
    "is_frozen",
    "is_dirty",
    "effective_identity",
    "equals",
    "has_changed",
]
