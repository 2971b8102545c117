"""statebranch: cheap, copy-on-write branches of nested state.

Usage:
    from statebranch import create, equals, freeze, has_changed

    state = {"todos": [{"done": False}], "filter": "all"}

    draft = create(state)
    draft["todos"][0]["done"] = True
    draft["todos"].append({"done": False})

    state["todos"][0]["done"]  # still False
    has_changed(draft)  # True
    equals(state["filter"], draft["filter"])  # True

    freeze(draft, deep=True)
"""

__version__ = "0.1.0"

# Core primitives
from statebranch.core import (
    ArrayBranch,
    Branched,
    BranchNode,
    Flag,
    ObjectBranch,
    PropertyDescriptor,
    create,
    effective_identity,
    equals,
    freeze,
    has_changed,
    is_branch,
    is_dirty,
    is_frozen,
)

# Configuration
from statebranch.config import BranchSettings, configure, get_settings, reset_settings

# Errors
from statebranch.errors import BranchError, FrozenBranchError, InvalidBranchError

__all__ = [
    # Version
    "__version__",
    # Core
    "create",
    "Branched",
    "Flag",
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
    # Config
    "BranchSettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Errors
    "BranchError",
    "FrozenBranchError",
    "InvalidBranchError",
]
