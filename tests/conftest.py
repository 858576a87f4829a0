"""
Pytest configuration and fixtures for authn tests.

Provides fixtures for:
- Clean settings cache and configured provider per test
- Environment without AUTH_PROVIDER / LOG_* overrides
"""

import pytest

from authn.config.settings import get_settings
from authn.core.providers import reset_provider


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove environment overrides and reset cached configuration."""
    for name in ("AUTH_PROVIDER", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    reset_provider()

    yield

    get_settings.cache_clear()
    reset_provider()
