"""Unit tests for configuration and logging setup."""
import logging
from pathlib import Path

import pytest

from autochat.config import (
    DEFAULT_API_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_THROTTLE_INTERVAL_MS,
    Settings,
    get_settings,
)
from autochat.logging_config import PACKAGE_LOGGER, configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    """Remove AUTOCHAT_* variables so defaults apply."""
    for name in (
        "AUTOCHAT_BASE_URL",
        "AUTOCHAT_API_PATH",
        "AUTOCHAT_THROTTLE_MS",
        "AUTOCHAT_REQUEST_TIMEOUT",
        "AUTOCHAT_RENDER_MARKDOWN",
        "AUTOCHAT_SESSION_FILE",
        "AUTOCHAT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, clean_env):
        """Test the default configuration."""
        settings = Settings()

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.api_path == DEFAULT_API_PATH
        assert settings.throttle_interval_ms == DEFAULT_THROTTLE_INTERVAL_MS == 50
        assert settings.request_timeout is None
        assert settings.render_markdown is True
        assert settings.endpoint == "http://localhost:3000/api/chat"

    def test_environment_overrides(self, clean_env):
        """Test that environment variables override defaults."""
        clean_env.setenv("AUTOCHAT_BASE_URL", "https://bot.example.com")
        clean_env.setenv("AUTOCHAT_API_PATH", "v1/chat")
        clean_env.setenv("AUTOCHAT_THROTTLE_MS", "120")
        clean_env.setenv("AUTOCHAT_REQUEST_TIMEOUT", "30")
        clean_env.setenv("AUTOCHAT_RENDER_MARKDOWN", "false")
        clean_env.setenv("AUTOCHAT_SESSION_FILE", "/tmp/autochat-session.json")

        settings = Settings()

        assert settings.endpoint == "https://bot.example.com/v1/chat"
        assert settings.throttle_interval_ms == 120
        assert settings.request_timeout == 30.0
        assert settings.render_markdown is False
        assert settings.session_file == Path("/tmp/autochat-session.json")

    def test_invalid_numbers_fall_back(self, clean_env):
        """Test that unparseable numbers use defaults."""
        clean_env.setenv("AUTOCHAT_THROTTLE_MS", "soon")
        clean_env.setenv("AUTOCHAT_REQUEST_TIMEOUT", "never")

        settings = Settings()

        assert settings.throttle_interval_ms == 50
        assert settings.request_timeout is None

    def test_negative_throttle_fails(self):
        """Test that the throttle interval cannot be negative."""
        with pytest.raises(ValueError):
            Settings(throttle_interval_ms=-1)

    def test_get_settings_cached(self):
        """Test that get_settings returns one shared instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestLogging:
    """Tests for logging setup."""

    def test_configure_logging_is_idempotent(self):
        """Test that repeated setup leaves a single handler at the requested level."""
        logger = logging.getLogger(PACKAGE_LOGGER)
        try:
            configure_logging("INFO")
            configure_logging("DEBUG")

            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
