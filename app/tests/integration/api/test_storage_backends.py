"""
End-to-end tests with non-default configuration: the create-once care plan
policy, and the SQLAlchemy backend behind the full application.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.app_factory import create_application
from app.core.config.settings import Settings
from app.tests.helpers.answers import EPDS_MODERATE, PHQ9_SEVERE

pytestmark = pytest.mark.asyncio


@asynccontextmanager
async def _open_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client


@pytest.fixture
def create_once_app(test_settings: Settings) -> FastAPI:
    return create_application(
        settings_override=test_settings.model_copy(update={"CARE_PLAN_POLICY": "create_once"})
    )


@pytest_asyncio.fixture
async def create_once_client(create_once_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with _open_client(create_once_app) as test_client:
        yield test_client


@pytest.fixture
def sqlalchemy_app(test_settings: Settings) -> FastAPI:
    return create_application(
        settings_override=test_settings.model_copy(update={"STORAGE_BACKEND": "sqlalchemy"})
    )


@pytest_asyncio.fixture
async def sqlalchemy_client(sqlalchemy_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with _open_client(sqlalchemy_app) as test_client:
        yield test_client


def _headers(app: FastAPI, user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {app.state.jwt_service.create_access_token(user_id)}"}


async def test_create_once_keeps_the_first_plan(
    create_once_client: AsyncClient, create_once_app: FastAPI, user_id: str
):
    headers = _headers(create_once_app, user_id)

    first = await create_once_client.post(
        "/api/v1/assessments",
        json={"questionnaire_type": "epds", "answers": EPDS_MODERATE},
        headers=headers,
    )
    retake = await create_once_client.post(
        "/api/v1/assessments",
        json={"questionnaire_type": "phq9", "answers": PHQ9_SEVERE},
        headers=headers,
    )

    assert first.json()["care_plan_created"] is True
    assert retake.json()["care_plan_created"] is False
    assert retake.json()["goals"] == []
    assert retake.json()["care_plan"]["id"] == first.json()["care_plan"]["id"]
    # The retake itself is still stored
    assert retake.json()["assessment"]["severity"] == "Severe"

    goals = await create_once_client.get("/api/v1/goals", headers=headers)
    assert len(goals.json()) == 3


async def test_full_flow_on_sqlalchemy(
    sqlalchemy_client: AsyncClient, sqlalchemy_app: FastAPI, user_id: str
):
    headers = _headers(sqlalchemy_app, user_id)

    submitted = await sqlalchemy_client.post(
        "/api/v1/assessments",
        json={"questionnaire_type": "phq9", "answers": PHQ9_SEVERE},
        headers=headers,
    )
    assert submitted.status_code == 201

    latest = await sqlalchemy_client.get("/api/v1/assessments/latest", headers=headers)
    plan = await sqlalchemy_client.get("/api/v1/care-plans/latest", headers=headers)
    goals = await sqlalchemy_client.get("/api/v1/goals", headers=headers)

    assert latest.json()["id"] == submitted.json()["assessment"]["id"]
    assert latest.json()["answers"] == submitted.json()["assessment"]["answers"]
    assert plan.json()["id"] == submitted.json()["care_plan"]["id"]
    assert [g["id"] for g in goals.json()] == [g["id"] for g in submitted.json()["goals"]]

    goal_id = goals.json()[0]["id"]
    toggled = await sqlalchemy_client.patch(
        f"/api/v1/goals/{goal_id}", json={"completed": True}, headers=headers
    )
    assert toggled.json()["completed"] is True

    logged = await sqlalchemy_client.post("/api/v1/moods", json={"mood": "Okay"}, headers=headers)
    today = await sqlalchemy_client.get("/api/v1/moods/today", headers=headers)
    assert today.json()["id"] == logged.json()["id"]
