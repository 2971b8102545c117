"""Branch nodes: object and array overlays plus the factory choosing between them."""

from statebranch.core.branch.array_branch import ArrayBranch
from statebranch.core.branch.base import BranchNode
from statebranch.core.branch.descriptor import PropertyDescriptor
from statebranch.core.branch.factory import create
from statebranch.core.branch.object_branch import ObjectBranch

__all__ = [
    # Models
    "BranchNode",
    "ObjectBranch",
    "ArrayBranch",
    "PropertyDescriptor",
    # Factory
    "create",
]
