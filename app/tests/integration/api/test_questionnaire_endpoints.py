"""
Tests for the public questionnaire catalogue and health endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_health(client: AsyncClient):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}
    assert "x-request-id" in response.headers


async def test_list_questionnaires(client: AsyncClient):
    response = await client.get("/api/v1/questionnaires")

    assert response.status_code == 200
    body = response.json()
    assert [(q["type"], q["name"], q["question_count"], q["max_score"]) for q in body] == [
        ("epds", "EPDS", 10, 30),
        ("phq9", "PHQ-9", 9, 27),
    ]


async def test_get_questionnaire_questions(client: AsyncClient):
    response = await client.get("/api/v1/questionnaires/PHQ-9")

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "phq9"
    assert body["self_harm_question_id"] == 9
    assert len(body["questions"]) == 9
    assert [o["value"] for o in body["questions"][0]["options"]] == [0, 1, 2, 3]


async def test_unknown_questionnaire(client: AsyncClient):
    response = await client.get("/api/v1/questionnaires/gad7")

    assert response.status_code == 422
    assert response.json()["error_code"] == "INVALID_QUESTIONNAIRE_TYPE"


@pytest.mark.parametrize(
    "path, severity, color_tag",
    [
        ("/api/v1/questionnaires/epds/interpretation?score=12", "Moderate Risk", "warning"),
        ("/api/v1/questionnaires/epds/interpretation?score=13", "High Risk", "destructive"),
        ("/api/v1/questionnaires/phq9/interpretation?score=4", "Minimal", "success"),
    ],
)
async def test_interpret_score(client: AsyncClient, path: str, severity: str, color_tag: str):
    response = await client.get(path)

    assert response.status_code == 200
    body = response.json()
    assert body["severity"] == severity
    assert body["color_tag"] == color_tag


async def test_interpret_out_of_range_score(client: AsyncClient):
    response = await client.get("/api/v1/questionnaires/phq9/interpretation?score=28")

    assert response.status_code == 422
    assert response.json()["error_code"] == "SCORE_OUT_OF_RANGE"


async def test_interpret_requires_integer_score(client: AsyncClient):
    response = await client.get("/api/v1/questionnaires/epds/interpretation?score=high")

    assert response.status_code == 422
    assert response.json()["error_code"] == "REQUEST_VALIDATION_ERROR"
