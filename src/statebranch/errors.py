"""Branch violations and how they are reported.

Violations never abort the caller by default: they are logged and the offending
operation has no effect. Set ``STATEBRANCH_STRICT=1`` (or ``configure(strict=True)``)
to have them raised instead.
"""

from __future__ import annotations

import logging as _logging

from statebranch.config import get_settings

_logger = _logging.getLogger(__name__)


class BranchError(Exception):
    """Base class for branch violations."""

    pass


class FrozenBranchError(BranchError):
    """Raised (in strict mode) when a frozen or read-only key is mutated."""

    pass


class InvalidBranchError(BranchError, TypeError):
    """Raised (in strict mode) when an operation needs a branch but got something else."""

    pass


def report_violation(error: BranchError) -> None:
    """Log a violation, or raise it when strict mode is on."""
    settings = get_settings()
    if settings.strict:
        raise error
    if settings.log_violations:
        _logger.error("%s", error)
