"""
Tests for storage backend selection.
"""

import pytest

from app.core.config.settings import Settings
from app.domain.exceptions import ConfigurationError
from app.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyAssessmentRepository,
    SQLAlchemyCarePlanRepository,
    SQLAlchemySubmissionRepository,
)
from app.infrastructure.repositories.factory import open_repositories
from app.infrastructure.repositories.memory import (
    InMemoryAssessmentRepository,
    InMemoryMoodRepository,
    InMemorySubmissionRepository,
)


@pytest.mark.asyncio
async def test_memory_backend(test_settings: Settings):
    async with open_repositories(test_settings) as repositories:
        assert isinstance(repositories.assessments, InMemoryAssessmentRepository)
        assert isinstance(repositories.moods, InMemoryMoodRepository)
        assert isinstance(repositories.submissions, InMemorySubmissionRepository)


@pytest.mark.asyncio
async def test_sqlalchemy_backend_creates_schema(test_settings: Settings):
    settings = test_settings.model_copy(update={"STORAGE_BACKEND": "sqlalchemy"})

    async with open_repositories(settings) as repositories:
        assert isinstance(repositories.assessments, SQLAlchemyAssessmentRepository)
        assert isinstance(repositories.care_plans, SQLAlchemyCarePlanRepository)
        assert isinstance(repositories.submissions, SQLAlchemySubmissionRepository)
        assert await repositories.assessments.list_by_user_id("nobody") == []


@pytest.mark.asyncio
async def test_unknown_backend(test_settings: Settings):
    settings = test_settings.model_copy(update={"STORAGE_BACKEND": "redis"})

    with pytest.raises(ConfigurationError):
        async with open_repositories(settings):
            pass
