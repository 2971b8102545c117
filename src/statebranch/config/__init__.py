"""Configuration module using Pydantic Settings.

Usage:
    from statebranch.config import BranchSettings, configure

    configure(strict=True)
"""

from statebranch.config.settings import BranchSettings, configure, get_settings, reset_settings

__all__ = [
    "BranchSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
