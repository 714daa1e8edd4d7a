"""
Shared test fixtures for the simple_rng test suite.

Provides fixtures for:
- Isolating tests from SIMPLE_RNG_* environment variables
- Resetting the cached settings between tests
"""

import pytest

from simple_rng.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for name in ("SIMPLE_RNG_SEED", "SIMPLE_RNG_STD", "SIMPLE_RNG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def constrained_mode(monkeypatch):
    """Run with time seeding disabled."""
    monkeypatch.setenv("SIMPLE_RNG_STD", "false")
    get_settings.cache_clear()
