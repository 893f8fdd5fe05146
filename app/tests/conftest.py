"""
Global test configuration for the entire test suite.

This module contains fixtures and configurations that should be available
to all tests in the application. It is automatically loaded by pytest.
"""

import os

# Must be set before the settings module creates its global instance
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORAGE_BACKEND", "memory")

import logging
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from faker import Faker
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.application.services import (
    AssessmentService,
    CarePlanPolicy,
    CarePlanService,
    GoalService,
    MoodService,
)
from app.core.config.settings import Settings
from app.domain.services.assessment_engine import AssessmentEngine
from app.infrastructure.repositories.factory import RepositoryBundle, create_memory_repositories
from app.infrastructure.security.jwt import JWTService

logger = logging.getLogger(__name__)

TEST_JWT_SECRET = "test-secret-key-for-unit-tests-only-0123456789"


@pytest.fixture(scope="session")
def fake() -> Faker:
    fake = Faker()
    Faker.seed(1234)
    return fake


@pytest.fixture
def user_id(fake: Faker) -> str:
    return fake.uuid4()


@pytest.fixture
def test_settings() -> Settings:
    """
    Create test application settings.

    In-memory storage, a fixed JWT secret and no Sentry.
    """
    return Settings(
        ENVIRONMENT="test",
        TESTING=True,
        STORAGE_BACKEND="memory",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        JWT_SECRET_KEY=TEST_JWT_SECRET,
        JWT_ISSUER="maternal-wellness-test",
        JWT_AUDIENCE="maternal-wellness-api",
        CARE_PLAN_POLICY="regenerate",
        SENTRY_DSN=None,
        LOG_LEVEL="INFO",
    )


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(
        secret_key=TEST_JWT_SECRET,
        issuer="maternal-wellness-test",
        audience="maternal-wellness-api",
    )


@pytest.fixture
def engine() -> AssessmentEngine:
    return AssessmentEngine()


@pytest.fixture
def repositories() -> RepositoryBundle:
    return create_memory_repositories()


@pytest.fixture
def care_plan_service(engine: AssessmentEngine, repositories: RepositoryBundle) -> CarePlanService:
    return CarePlanService(
        engine=engine,
        care_plan_repository=repositories.care_plans,
        policy=CarePlanPolicy.REGENERATE,
    )


@pytest.fixture
def assessment_service(
    engine: AssessmentEngine,
    repositories: RepositoryBundle,
    care_plan_service: CarePlanService,
) -> AssessmentService:
    return AssessmentService(
        engine=engine,
        assessment_repository=repositories.assessments,
        submission_repository=repositories.submissions,
        care_plan_service=care_plan_service,
    )


@pytest.fixture
def goal_service(repositories: RepositoryBundle) -> GoalService:
    return GoalService(repositories.goals)


@pytest.fixture
def mood_service(repositories: RepositoryBundle) -> MoodService:
    return MoodService(repositories.moods)


@pytest.fixture
def app_instance(test_settings: Settings) -> FastAPI:
    from app.app_factory import create_application

    return create_application(settings_override=test_settings)


@pytest_asyncio.fixture
async def client(app_instance: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client bound to the application, with the lifespan running so the
    repositories exist on app.state.
    """
    async with app_instance.router.lifespan_context(app_instance):
        transport = ASGITransport(app=app_instance)
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client


@pytest.fixture
def auth_headers(app_instance: FastAPI, user_id: str) -> dict[str, str]:
    token = app_instance.state.jwt_service.create_access_token(user_id)
    return {"Authorization": f"Bearer {token}"}
