"""
Tests for the domain exception to HTTP response translation.
"""

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    EntityNotFoundError,
    IncompleteAssessmentError,
    PersistenceError,
)
from app.presentation.api.exception_handlers import register_exception_handlers


def build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/incomplete")
    async def incomplete():
        raise IncompleteAssessmentError("EPDS", [9, 10])

    @app.get("/missing")
    async def missing():
        raise EntityNotFoundError("Goal", "abc")

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise AuthenticationError("Token has expired")

    @app.get("/storage")
    async def storage():
        raise PersistenceError("connection refused to db.internal:5432")

    @app.get("/config")
    async def config():
        raise ConfigurationError("bad band table")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret internals")

    return app


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, status_code, error_code",
    [
        ("/incomplete", 422, "INCOMPLETE_ASSESSMENT"),
        ("/missing", 404, "NOT_FOUND"),
        ("/unauthenticated", 401, "AUTHENTICATION_ERROR"),
    ],
)
async def test_client_errors_keep_their_message(client, path, status_code, error_code):
    response = await client.get(path)

    assert response.status_code == status_code
    body = response.json()
    assert body["error_code"] == error_code
    assert body["detail"]
    assert "error_id" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, error_code, hidden",
    [
        ("/storage", "PERSISTENCE_ERROR", "db.internal"),
        ("/config", "CONFIGURATION_ERROR", "band table"),
        ("/crash", "INTERNAL_SERVER_ERROR", "secret internals"),
    ],
)
async def test_server_errors_are_generic(client, path, error_code, hidden):
    response = await client.get(path)

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == error_code
    assert body["error_id"]
    assert hidden not in response.text
