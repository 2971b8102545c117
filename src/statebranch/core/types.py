"""Core type definitions for statebranch."""

type Branched[T] = T
"""Type alias indicating a value is a branch of ``T`` rather than ``T`` itself.

When you see `Branched[T]` in a return type, the value reads like the original
but writes land in an overlay. The original is never mutated. To publish the
changes, adopt the branch itself as the new state.
"""
