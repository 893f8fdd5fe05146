"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from app.core.config.settings import TEST_DATABASE_URL, Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.API_V1_STR == "/api/v1"
    assert settings.CARE_PLAN_POLICY == "regenerate"
    assert settings.JWT_ALGORITHM == "HS256"
    assert len(settings.JWT_SECRET_KEY.get_secret_value()) >= 32


@pytest.mark.parametrize(
    "database_url, expected",
    [
        ("sqlite:///./data.db", "sqlite+aiosqlite:///./data.db"),
        ("postgresql://u:p@db/wellness", "postgresql+asyncpg://u:p@db/wellness"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_async_database_url_is_derived(database_url: str, expected: str):
    settings = Settings(_env_file=None, DATABASE_URL=database_url)
    assert settings.ASYNC_DATABASE_URL == expected


def test_explicit_async_database_url_wins():
    settings = Settings(
        _env_file=None,
        DATABASE_URL="sqlite:///./a.db",
        ASYNC_DATABASE_URL="sqlite+aiosqlite:///./b.db",
    )
    assert settings.ASYNC_DATABASE_URL == "sqlite+aiosqlite:///./b.db"


def test_log_level_is_normalized():
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="chatty")


@pytest.mark.parametrize("field, value", [("CARE_PLAN_POLICY", "sometimes"), ("STORAGE_BACKEND", "s3")])
def test_choices_are_validated(field: str, value: str):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_production_never_runs_in_debug():
    assert Settings(_env_file=None, ENVIRONMENT="production", DEBUG=True).DEBUG is False


def test_get_settings_switches_to_test_database_under_pytest():
    settings = get_settings()

    assert settings.is_testing
    assert settings.ASYNC_DATABASE_URL == TEST_DATABASE_URL
    assert settings.SENTRY_DSN is None
