"""
Unit tests for configuration and the fail-fast policy.
"""

import os
from unittest.mock import patch

import pytest

from screenplay.config.policy import (
    reset_fail_fast_policy,
    should_throw_errors_immediately,
    stop_throwing_errors_immediately,
    throw_errors_immediately,
)
from screenplay.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_settings(self):
        """Test default settings values."""
        settings = Settings()

        assert settings.fail_fast is False
        assert settings.implicit_wait_timeout_ms == 2000
        assert settings.wait_for_timeout_ms == 5000
        assert settings.event_history_limit == 1000
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.log_file is None

    def test_settings_from_env(self):
        """Test loading settings from environment variables."""
        with patch.dict(os.environ, {
            "SCREENPLAY_FAIL_FAST": "true",
            "SCREENPLAY_IMPLICIT_WAIT_TIMEOUT_MS": "750",
            "SCREENPLAY_LOG_LEVEL": "debug",
        }):
            settings = Settings()

            assert settings.fail_fast is True
            assert settings.implicit_wait_timeout_ms == 750
            assert settings.log_level == "DEBUG"

    def test_log_level_validation(self):
        """Test log level validation."""
        assert Settings(log_level="warning").log_level == "WARNING"

        with pytest.raises(ValueError, match="Invalid log level"):
            Settings(log_level="LOUD")

    def test_log_format_validation(self):
        """Test log format validation."""
        assert Settings(log_format="json").log_format == "json"

        with pytest.raises(ValueError, match="Invalid log format"):
            Settings(log_format="xml")

    def test_negative_timeouts_rejected(self):
        with pytest.raises(ValueError):
            Settings(wait_for_timeout_ms=-1)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestFailFastPolicy:
    """Tests for the process-wide fail-fast flag."""

    def test_defaults_to_settings(self):
        assert should_throw_errors_immediately() is False

    def test_configured_default(self):
        with patch.dict(os.environ, {"SCREENPLAY_FAIL_FAST": "1"}):
            get_settings.cache_clear()
            assert should_throw_errors_immediately() is True

    def test_explicit_toggle_overrides_settings(self):
        throw_errors_immediately()
        assert should_throw_errors_immediately() is True

        stop_throwing_errors_immediately()
        assert should_throw_errors_immediately() is False

    def test_reset_restores_configured_default(self):
        throw_errors_immediately()

        reset_fail_fast_policy()

        assert should_throw_errors_immediately() is False
