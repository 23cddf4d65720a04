"""Shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep WASTEWISE_* variables from the developer's shell out of tests."""
    monkeypatch.delenv("WASTEWISE_EXPIRY_DAYS", raising=False)
    monkeypatch.delenv("WASTEWISE_LOG_LEVEL", raising=False)
