"""Configuration settings using Pydantic Settings.

Controls how branch violations (writes to frozen branches, freezing plain
values) are reported.

Usage:
    from statebranch.config import configure, get_settings

    # Load from environment variables (STATEBRANCH_*)
    settings = get_settings()

    # Or override with explicit values
    configure(strict=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BranchSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for violation reporting.

    Attributes:
        strict: Raise violations as exceptions instead of logging them.
        log_violations: Emit a log record for non-strict violations.

    Environment Variables:
        STATEBRANCH_STRICT
        STATEBRANCH_LOG_VIOLATIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="STATEBRANCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = False
    log_violations: bool = True


_settings: BranchSettings | None = None


def get_settings() -> BranchSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = BranchSettings()
    return _settings


def configure(**overrides: bool) -> BranchSettings:
    """Replace the active settings with explicit values.

    Args:
        **overrides: Field values passed to BranchSettings.

    Returns:
        The newly active settings.
    """
    global _settings
    _settings = BranchSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop explicit overrides; the next lookup re-reads the environment."""
    global _settings
    _settings = None
