"""
Application settings module.

This module provides configuration settings for the application, including
security settings, storage selection, care plan policy and other
environment-specific values.
"""

# Standard Library Imports
import logging
import os
import secrets
from typing import Literal, Self

# Third-Party Imports
from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # API Information
    API_TITLE: str = "Maternal Wellness API"
    API_DESCRIPTION: str = (
        "Depression screening (EPDS, PHQ-9), care plans, goals and mood tracking "
        "for new and expecting mothers"
    )
    API_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Environment
    TESTING: bool = False
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    DEBUG: bool = False

    # Server Settings
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8000
    UVICORN_WORKERS: int = 4

    # Security Settings
    JWT_SECRET_KEY: SecretStr = Field(default_factory=lambda: SecretStr(secrets.token_urlsafe(64)))
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    JWT_ISSUER: str | None = None
    JWT_AUDIENCE: str | None = None

    # CORS Settings
    CORS_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    # Storage Settings
    STORAGE_BACKEND: Literal["sqlalchemy", "memory"] = "sqlalchemy"
    DATABASE_URL: str = "sqlite+aiosqlite:///./maternal_wellness.db"
    ASYNC_DATABASE_URL: str | None = None  # Derived from DATABASE_URL if None
    DB_ECHO_LOG: bool = False

    # Care plan policy: a new plan per assessment, or only the first one kept
    CARE_PLAN_POLICY: Literal["regenerate", "create_once"] = "regenerate"

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Monitoring and Error Tracking (Sentry)
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = Field(default=0.2, ge=0.0, le=1.0)
    SENTRY_PROFILES_SAMPLE_RATE: float = Field(default=0.2, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def ensure_async_database_url(self) -> Self:
        """Ensure ASYNC_DATABASE_URL is set properly from DATABASE_URL."""
        if not self.ASYNC_DATABASE_URL:
            db_url = self.DATABASE_URL
            if db_url.startswith("sqlite:///"):
                self.ASYNC_DATABASE_URL = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")
            elif db_url.startswith("postgresql://"):
                self.ASYNC_DATABASE_URL = db_url.replace("postgresql://", "postgresql+asyncpg://")
            else:
                self.ASYNC_DATABASE_URL = db_url

        if self.ENVIRONMENT in ("production", "test"):
            self.DEBUG = False

        return self

    @property
    def is_testing(self) -> bool:
        return self.TESTING or self.ENVIRONMENT == "test"


# Create a global settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    This function enables dependency injection of settings in FastAPI.
    Under pytest (or ENVIRONMENT=test) the shared instance is switched to an
    in-memory database and Sentry is disabled.

    Returns:
        The application settings instance
    """
    if os.environ.get("ENVIRONMENT") == "test" or os.environ.get("PYTEST_CURRENT_TEST"):
        if not settings.TESTING:
            logger.info(f"Running in TEST environment, using DB: {TEST_DATABASE_URL}")
        settings.TESTING = True
        settings.ENVIRONMENT = "test"
        settings.DEBUG = False
        settings.DATABASE_URL = TEST_DATABASE_URL
        settings.ASYNC_DATABASE_URL = TEST_DATABASE_URL
        settings.SENTRY_DSN = None

    return settings
