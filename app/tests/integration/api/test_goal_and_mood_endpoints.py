"""
Tests for the goal and mood tracking endpoints.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from app.tests.helpers.answers import EPDS_MODERATE

pytestmark = pytest.mark.asyncio


class TestGoals:
    async def test_assessment_creates_template_goals(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ):
        await client.post(
            "/api/v1/assessments",
            json={"questionnaire_type": "epds", "answers": EPDS_MODERATE},
            headers=auth_headers,
        )

        goals = (await client.get("/api/v1/goals", headers=auth_headers)).json()

        assert [goal["title"] for goal in goals] == [
            "Take a 15-minute walk outside",
            "Practice deep breathing for 5 minutes",
            "Connect with a friend or family member",
        ]
        assert not any(goal["completed"] for goal in goals)

    async def test_create_and_complete_goal(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ):
        created = await client.post(
            "/api/v1/goals",
            json={"title": "Drink a glass of water", "description": "Every feed"},
            headers=auth_headers,
        )
        assert created.status_code == 201
        goal_id = created.json()["id"]

        updated = await client.patch(
            f"/api/v1/goals/{goal_id}", json={"completed": True}, headers=auth_headers
        )

        assert updated.status_code == 200
        assert updated.json()["completed"] is True

    async def test_blank_title_is_rejected(self, client: AsyncClient, auth_headers: dict[str, str]):
        response = await client.post("/api/v1/goals", json={"title": "   "}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_completed_must_be_a_boolean(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ):
        created = await client.post("/api/v1/goals", json={"title": "Walk"}, headers=auth_headers)

        response = await client.patch(
            f"/api/v1/goals/{created.json()['id']}",
            json={"completed": "yes"},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "REQUEST_VALIDATION_ERROR"

    async def test_unknown_goal(self, client: AsyncClient, auth_headers: dict[str, str]):
        response = await client.patch(
            f"/api/v1/goals/{uuid4()}", json={"completed": True}, headers=auth_headers
        )
        assert response.status_code == 404


class TestMoods:
    async def test_log_and_read_today(self, client: AsyncClient, auth_headers: dict[str, str]):
        missing = await client.get("/api/v1/moods/today", headers=auth_headers)
        assert missing.status_code == 404

        logged = await client.post(
            "/api/v1/moods", json={"mood": "Anxious", "notes": "Big day"}, headers=auth_headers
        )
        assert logged.status_code == 201

        today = await client.get("/api/v1/moods/today", headers=auth_headers)
        assert today.status_code == 200
        assert today.json()["mood"] == "Anxious"
        assert today.json()["notes"] == "Big day"

        history = (await client.get("/api/v1/moods", headers=auth_headers)).json()
        assert [entry["id"] for entry in history] == [logged.json()["id"]]

    async def test_unknown_mood(self, client: AsyncClient, auth_headers: dict[str, str]):
        response = await client.post("/api/v1/moods", json={"mood": "Ecstatic"}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
