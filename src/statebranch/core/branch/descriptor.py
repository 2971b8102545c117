"""Key metadata for object branches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class PropertyDescriptor:
    """A value plus the attributes deciding how a key may be used.

    Attributes:
        value: The stored value.
        enumerable: Key shows up when iterating the branch.
        configurable: Key may be deleted or redefined.
        writable: Key accepts plain assignment.
    """

    value: Any = None
    enumerable: bool = True
    configurable: bool = True
    writable: bool = True

    def same_attributes(self, other: PropertyDescriptor) -> bool:
        """Check whether two descriptors differ at most in their value."""
        return (
            self.enumerable == other.enumerable
            and self.configurable == other.configurable
            and self.writable == other.writable
        )
