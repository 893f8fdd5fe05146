import json
import logging
from unittest.mock import MagicMock

import pytest
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from app.presentation.middleware.logging import LoggingMiddleware


async def echo_endpoint(request: Request) -> JSONResponse:
    return JSONResponse({"ok": True}, status_code=201)


async def failing_endpoint(request: Request) -> JSONResponse:
    raise RuntimeError("kaboom")


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def client(mock_logger: MagicMock) -> TestClient:
    app = Starlette(
        routes=[
            Route("/echo", endpoint=echo_endpoint, methods=["POST"]),
            Route("/fail", endpoint=failing_endpoint),
        ],
        middleware=[Middleware(LoggingMiddleware, logger=mock_logger)],
    )
    return TestClient(app, raise_server_exceptions=False)


def test_logs_one_json_line_without_body_or_auth(client: TestClient, mock_logger: MagicMock):
    response = client.post(
        "/echo",
        json={"answers": {"10": 3}, "notes": "private"},
        headers={"Authorization": "Bearer secret-token", "User-Agent": "pytest"},
    )

    assert response.status_code == 201
    level, message = mock_logger.log.call_args.args
    details = json.loads(message)
    assert level == logging.INFO
    assert details["status_code"] == 201
    assert details["method"] == "POST"
    assert details["path"] == "/echo"
    assert details["headers"]["user-agent"] == "pytest"
    assert "authorization" not in details["headers"]
    assert "private" not in message
    assert "secret-token" not in message


def test_failures_are_logged_and_reraised(client: TestClient, mock_logger: MagicMock):
    response = client.get("/fail")

    assert response.status_code == 500
    mock_logger.error.assert_called_once()
    assert "/fail" in mock_logger.error.call_args.args[0]
