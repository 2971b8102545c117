"""Object branches: a mapping overlay over a base mapping.

Reads fall through to the base until a key is written. Composite values read
from the base are wrapped in their own branch on first access and cached, so
``node["a"] is node["a"]`` holds until ``"a"`` is written or deleted.

Usage:
    state = {"user": {"name": "Ada"}, "tags": ["x"]}
    draft = ObjectBranch(state)

    draft["user"]["name"] = "Grace"
    del draft["tags"]

    state["user"]["name"]  # still "Ada"
"""

from __future__ import annotations

import logging as _logging
from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import replace
from itertools import chain
from typing import Any

from statebranch.core.branch.base import BranchNode, wrap
from statebranch.core.branch.descriptor import PropertyDescriptor
from statebranch.core.flags import Flag
from statebranch.core.values import is_composite, same_value
from statebranch.errors import FrozenBranchError, report_violation

_logger = _logging.getLogger(__name__)

_ABSENT = object()


class ObjectBranch(BranchNode, MutableMapping[Any, Any]):
    """Overlay node for a mapping.

    Structure:
        _overrides[key] = descriptor written through this node
        _deleted = keys removed through this node
        _children[key] = branch materialized from a base value

    The base is only ever read.

    Args:
        base: Mapping to branch from. May itself be a branch.
    """

    __slots__ = ("_base", "_overrides", "_deleted", "_children")

    def __init__(self, base: Mapping[Any, Any]) -> None:
        super().__init__()
        self._base = base
        self._overrides: dict[Any, PropertyDescriptor] = {}
        self._deleted: set[Any] = set()
        self._children: dict[Any, Any] = {}

    def _origin(self) -> Mapping[Any, Any]:
        return self._base

    # Base access

    def _base_has(self, key: Any) -> bool:
        return key in self._base

    def _base_descriptor(self, key: Any) -> PropertyDescriptor | None:
        base = self._base
        if isinstance(base, ObjectBranch):
            return base.describe(key)
        if key in base:
            return PropertyDescriptor(value=base[key])
        return None

    def _peek(self, key: Any) -> Any:
        """Return the visible value without materializing children."""
        if key in self._deleted:
            return _ABSENT
        if key in self._overrides:
            return self._overrides[key].value
        if key in self._children:
            return self._children[key]
        base = self._base
        if isinstance(base, ObjectBranch):
            return base._peek(key)
        if key in base:
            return base[key]
        return _ABSENT

    # Reads

    def describe(self, key: Any) -> PropertyDescriptor | None:
        """Return the descriptor currently visible for a key.

        Composite base values are materialized into child branches here, unless
        the base marks the key non-configurable, in which case the raw value is
        exposed.

        Args:
            key: Key to look up.

        Returns:
            Descriptor for the key, or None if the key is absent.
        """
        if isinstance(key, Flag) or key in self._deleted:
            return None

        override = self._overrides.get(key)
        if override is not None:
            return override

        descriptor = self._base_descriptor(key)
        if descriptor is None:
            return None

        child = self._children.get(key)
        if child is not None:
            return replace(descriptor, value=child)

        if is_composite(descriptor.value) and descriptor.configurable:
            child = wrap(descriptor.value)
            self._children[key] = child
            _logger.debug("Materialized child branch for key %r", key)
            return replace(descriptor, value=child)

        return descriptor

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, Flag):
            return self._read_flag(key)
        descriptor = self.describe(key)
        if descriptor is None:
            raise KeyError(key)
        return descriptor.value

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Flag) or key in self._deleted:
            return False
        return key in self._overrides or self._base_has(key)

    def _candidate_keys(self, base_keys: Iterator[Any]) -> list[Any]:
        keys = dict.fromkeys(chain(base_keys, self._overrides))
        return [key for key in keys if key not in self._deleted]

    def __iter__(self) -> Iterator[Any]:
        """Iterate enumerable keys: base keys first, then keys added here."""
        for key in self._candidate_keys(iter(self._base)):
            override = self._overrides.get(key)
            if override is None or override.enumerable:
                yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def own_keys(self) -> list[Any]:
        """Return every visible key, enumerable or not."""
        base = self._base
        base_keys = iter(base.own_keys()) if isinstance(base, ObjectBranch) else iter(base)
        return self._candidate_keys(base_keys)

    # Writes

    def define(self, key: Any, descriptor: PropertyDescriptor) -> bool:
        """Record a descriptor for a key, bypassing the no-change check.

        Args:
            key: Key to define.
            descriptor: Value and attributes to store. The value is stored as is.

        Returns:
            True if the definition was recorded, False if it was rejected.
        """
        if isinstance(key, Flag):
            self._write_flag(key, descriptor.value)
            return True

        if self._frozen:
            report_violation(FrozenBranchError(f"Cannot define key {key!r} on a frozen branch"))
            return False

        current = self._overrides.get(key)
        if current is not None and not current.configurable:
            value_only = current.writable and current.same_attributes(descriptor)
            if not value_only:
                report_violation(
                    FrozenBranchError(f"Cannot redefine non-configurable key {key!r}")
                )
                return False

        self._dirty = True
        self._deleted.discard(key)
        self._children.pop(key, None)
        self._overrides[key] = descriptor
        return True

    def set(self, key: Any, value: Any) -> bool:
        """Assign a value to a key.

        Writes to a frozen branch are ignored silently. Writing the value a key
        already shows leaves the branch clean. Composite values are branched
        before they are stored, so the caller's object is never mutated.

        Returns:
            False if the key is read-only, True otherwise.
        """
        if self._frozen:
            return True

        if isinstance(key, Flag):
            self._write_flag(key, value)
            return True

        if same_value(self._peek(key), value):
            return True

        current = self._overrides.get(key)
        if current is None:
            return self.define(key, PropertyDescriptor(value=wrap(value)))

        if not current.writable:
            report_violation(FrozenBranchError(f"Cannot assign to read-only key {key!r}"))
            return False
        return self.define(key, replace(current, value=wrap(value)))

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def remove(self, key: Any) -> bool:
        """Delete a key, whether or not it is currently visible.

        Returns:
            True if the deletion was recorded, False if it was rejected.
        """
        if isinstance(key, Flag):
            _logger.warning("Ignoring delete of flag %s", key.name)
            return False

        if self._frozen:
            report_violation(FrozenBranchError(f"Cannot delete key {key!r} from a frozen branch"))
            return False

        current = self._overrides.get(key)
        if current is not None and not current.configurable:
            report_violation(FrozenBranchError(f"Cannot delete non-configurable key {key!r}"))
            return False

        self._dirty = True
        self._overrides.pop(key, None)
        self._children.pop(key, None)
        self._deleted.add(key)
        return True

    def __delitem__(self, key: Any) -> None:
        if not self._frozen and key not in self:
            raise KeyError(key)
        self.remove(key)

    def setdefault(self, key: Any, default: Any = None) -> Any:
        """Write default if key is absent, then return the stored value.

        The stored value is the branch wrapping a composite default, so changes
        made through the return value land in this branch.
        """
        if key not in self:
            self.set(key, default)
        return self[key] if key in self else default

    def clear(self) -> None:
        if self._frozen:
            report_violation(FrozenBranchError("Cannot clear a frozen branch"))
            return
        for key in self.own_keys():
            self.remove(key)

    def __repr__(self) -> str:
        # _peek keeps repr from materializing children
        return f"{type(self).__name__}({ {key: self._peek(key) for key in self}!r})"
