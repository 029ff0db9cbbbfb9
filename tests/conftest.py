"""Test configuration and fixtures."""

import pytest

from tagkit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Load settings from a clean environment for every test."""
    for var in ("ENVIRONMENT", "DEBUG", "IDENTIFIERS__LENGTH"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
