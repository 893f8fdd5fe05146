"""
Request logging middleware.

Emits one JSON line per request. Bodies are never logged: they carry
questionnaire answers and free-text notes.
"""

import json
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Headers that are safe to log. Authorization is deliberately absent.
SAFE_HEADERS_ALLOWLIST = {
    "accept",
    "accept-encoding",
    "accept-language",
    "user-agent",
}


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging request outcomes and durations."""

    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None) -> None:
        super().__init__(app)
        self.logger = logger or logging.getLogger(__name__)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        request_id = getattr(request.state, "request_id", "N/A")
        safe_headers = {
            k: v for k, v in request.headers.items() if k.lower() in SAFE_HEADERS_ALLOWLIST
        }

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            self.logger.error(
                f"Request failed: {request.method} {request.url.path} {request_id} "
                f"| Duration: {duration_ms:.2f}ms",
                exc_info=True,
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        details = {
            "message": "Request finished",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "N/A",
            "headers": safe_headers,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        self.logger.log(level, json.dumps(details))
        return response
