"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- Loading from environment variables
- Validation (log level, correlation header)
- Environment detection and JSON log selection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gateway.core.config import Settings, get_settings
from gateway.core.enums import Environment


class TestEnvironmentEnum:
    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.correlation_header == "X-Correlation-ID"

    def test_loads_from_environment(self):
        env = {
            "ENVIRONMENT": "production",
            "APP_NAME": "Gateway",
            "APP_VERSION": "3.1.0",
            "LOG_LEVEL": "warning",
            "CORRELATION_HEADER": "X-Request-ID",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_production
        assert settings.app_name == "Gateway"
        assert settings.app_version == "3.1.0"
        assert settings.log_level == "WARNING"
        assert settings.correlation_header == "X-Request-ID"


@pytest.mark.unit
class TestSettingsValidation:
    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, log_level="verbose")

        assert any("log_level must be one of" in str(e) for e in exc_info.value.errors())

    def test_rejects_blank_correlation_header(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, correlation_header="   ")

    def test_rejects_unknown_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="staging")


@pytest.mark.unit
class TestEnvironmentProperties:
    @pytest.mark.parametrize(
        ("environment", "log_json", "expected"),
        [
            ("development", False, False),
            ("development", True, True),
            ("testing", False, True),
            ("ci", False, True),
            ("production", False, False),
        ],
    )
    def test_use_json_logs(self, environment, log_json, expected):
        settings = Settings(_env_file=None, environment=environment, log_json=log_json)
        assert settings.use_json_logs is expected

    def test_is_testing(self):
        assert Settings(_env_file=None, environment="testing").is_testing
        assert not Settings(_env_file=None, environment="testing").is_development


@pytest.mark.unit
class TestGetSettings:
    def test_returns_cached_instance(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
