"""Unit tests for settings, logging setup and the configured provider

Environment is isolated per test by the autouse fixture in conftest.py.
"""

import io
import json
import logging

import pytest

from authn.config.logging_config import configure_logging
from authn.config.settings import Settings, get_settings
from authn.core.providers import get_configured_provider, provider_allows_2fa, reset_provider
from authn.domain.models import PROVIDER_DEFAULT, PROVIDER_LDAP, ProviderType

pytestmark = pytest.mark.unit


class TestSettings:
    """Test Settings loading"""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.service_name == "authn"
        assert settings.auth_provider == PROVIDER_DEFAULT
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_auth_provider_from_env(self, monkeypatch):
        """Test AUTH_PROVIDER is normalized on load"""
        monkeypatch.setenv("AUTH_PROVIDER", "LDAP/AD")

        settings = Settings(_env_file=None)

        assert isinstance(settings.auth_provider, ProviderType)
        assert settings.auth_provider == PROVIDER_LDAP

    def test_auth_provider_from_init(self):
        settings = Settings(_env_file=None, auth_provider="passwd")
        assert settings.auth_provider == "local"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfiguredProvider:
    """Test get_configured_provider"""

    def test_default(self, monkeypatch):
        monkeypatch.setattr("authn.core.providers.get_settings", lambda: Settings(_env_file=None))

        provider = get_configured_provider()

        assert provider.is_default()

    def test_alias_from_env(self, monkeypatch, caplog):
        """Test the configured alias resolves to its canonical provider"""
        monkeypatch.setenv("AUTH_PROVIDER", "ad")

        with caplog.at_level(logging.INFO, logger="authn.core.providers"):
            provider = get_configured_provider()

        assert provider == PROVIDER_LDAP
        assert "Auth provider initialized: ldap (LDAP/AD)" in caplog.text

    def test_unknown_is_kept_with_warning(self, monkeypatch, caplog):
        """Test unknown identifiers are returned and logged, not rejected"""
        monkeypatch.setenv("AUTH_PROVIDER", "OIDC")

        with caplog.at_level(logging.WARNING, logger="authn.core.providers"):
            provider = get_configured_provider()

        assert provider == "oidc"
        assert "Unknown AUTH_PROVIDER: oidc" in caplog.text

    def test_cached_until_reset(self, monkeypatch):
        """Test the resolved provider is cached"""
        monkeypatch.setenv("AUTH_PROVIDER", "local")
        assert get_configured_provider() == "local"

        monkeypatch.setenv("AUTH_PROVIDER", "ldap")
        get_settings.cache_clear()
        assert get_configured_provider() == "local"

        reset_provider()
        assert get_configured_provider() == "ldap"


class TestProviderAllows2FA:
    """Test provider_allows_2fa"""

    @pytest.mark.parametrize("value", ["", "password", "LDAP", "ad", None, PROVIDER_DEFAULT])
    def test_allowed(self, value):
        assert provider_allows_2fa(value) is True

    @pytest.mark.parametrize("value", ["token", "client", "none", "custom", ProviderType("password")])
    def test_not_allowed(self, value):
        assert provider_allows_2fa(value) is False


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after configure_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    yield root

    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Test configure_logging output"""

    def test_text_format(self, root_logger):
        stream = io.StringIO()
        configure_logging(Settings(_env_file=None, log_level="debug"), stream=stream)

        logging.getLogger("authn.tests").debug("Auth provider initialized: ldap")

        line = stream.getvalue().strip()
        assert root_logger.level == logging.DEBUG
        assert " - authn.tests - DEBUG - Auth provider initialized: ldap" in line

    def test_json_format_escapes_message(self, root_logger):
        """Test JSON lines stay valid for quotes, backslashes and newlines"""
        stream = io.StringIO()
        configure_logging(Settings(_env_file=None, log_format="JSON"), stream=stream)

        message = 'Unknown AUTH_PROVIDER: "ldap\\ad"\nsecond line'
        logging.getLogger("authn.tests").warning(message)

        lines = stream.getvalue().strip().splitlines()
        assert len(lines) == 1

        record = json.loads(lines[0])
        assert record["message"] == message
        assert record["levelname"] == "WARNING"
        assert record["name"] == "authn.tests"
        assert "asctime" in record

    def test_json_format_skips_below_level(self, root_logger):
        stream = io.StringIO()
        configure_logging(Settings(_env_file=None, log_format="json"), stream=stream)

        logging.getLogger("authn.tests").debug("hidden")

        assert stream.getvalue() == ""

    def test_replaces_existing_handlers(self, root_logger):
        configure_logging(Settings(_env_file=None), stream=io.StringIO())
        configure_logging(Settings(_env_file=None), stream=io.StringIO())

        assert len(root_logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self, root_logger):
        stream = io.StringIO()
        configure_logging(Settings(_env_file=None, log_level="verbose"), stream=stream)

        assert root_logger.level == logging.INFO
        assert "WARNING - Unknown log level 'verbose', using INFO" in stream.getvalue()
