"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from statebranch import reset_settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Every test starts from environment-free default settings."""
    monkeypatch.delenv("STATEBRANCH_STRICT", raising=False)
    monkeypatch.delenv("STATEBRANCH_LOG_VIOLATIONS", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def nested_state():
    """Small reducer-style state tree."""
    return {
        "user": {"name": "Ada", "roles": ["admin"]},
        "todos": [{"title": "write", "done": False}],
        "count": 1,
    }
