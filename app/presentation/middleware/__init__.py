"""
HTTP middleware for the Maternal Wellness API.
"""

from app.presentation.middleware.logging import LoggingMiddleware
from app.presentation.middleware.request_id import REQUEST_ID_HEADER, RequestIdMiddleware

__all__ = ["REQUEST_ID_HEADER", "LoggingMiddleware", "RequestIdMiddleware"]
