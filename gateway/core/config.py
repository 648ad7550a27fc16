"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables. The
dispatch core itself needs very little configuration; everything here is
consumed by the composition root (gateway.main) and the logger factory.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (optionally a .env file)
- Type validation via Pydantic
- Every field has a safe default so tests can import the singleton

Usage:
    from gateway.core.config import settings

    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gateway.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Gateway settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file (if present)
        3. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (FastAPI debug, verbose logging)",
    )

    # Application metadata
    app_name: str = Field(
        default="API Gateway",
        description="Application name reported by the root endpoint",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version reported by the root endpoint",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Force JSON log rendering regardless of environment",
    )

    # Request correlation
    correlation_header: str = Field(
        default="X-Correlation-ID",
        description="Header carrying the per-request correlation id (read and echoed)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("correlation_header")
    @classmethod
    def validate_correlation_header(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("correlation_header cannot be empty")
        return v.strip()

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Whether logs should be rendered as JSON.

        Returns:
            bool: True in testing/ci or when log_json is set.
        """
        return self.log_json or self.environment in {
            Environment.TESTING,
            Environment.CI,
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
