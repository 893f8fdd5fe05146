"""
Exception handlers for the FastAPI application.

Translates domain exceptions into HTTP responses with a uniform body of
`{"detail", "error_code"}`. Server-side failures get an `error_id` that ties
the response to the logged traceback; their details never reach the client.
"""

import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse, Response
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_422_UNPROCESSABLE_ENTITY,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.domain.exceptions import (
    AuthenticationError,
    BaseApplicationError,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from app.presentation.api.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)

ExceptionHandler = Callable[[Request, Exception], Awaitable[Response]]


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, request_validation_handler)
    )
    app.add_exception_handler(ValidationError, cast(ExceptionHandler, validation_error_handler))
    app.add_exception_handler(EntityNotFoundError, cast(ExceptionHandler, not_found_handler))
    app.add_exception_handler(
        AuthenticationError, cast(ExceptionHandler, authentication_error_handler)
    )
    app.add_exception_handler(PersistenceError, cast(ExceptionHandler, persistence_error_handler))
    app.add_exception_handler(
        BaseApplicationError, cast(ExceptionHandler, application_error_handler)
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("Exception handlers registered")


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "N/A")


def _error_response(
    status_code: int,
    detail: str,
    error_code: str,
    error_id: str | None = None,
    headers: dict[str, str] | None = None,
    **extra: object,
) -> JSONResponse:
    content = ErrorResponse(detail=detail, error_code=error_code, error_id=error_id).model_dump(
        exclude_none=True
    )
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies, paths and queries."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    logger.info(f"Request validation failed on {request.url.path} ({len(errors)} errors)")
    return _error_response(
        HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed",
        "REQUEST_VALIDATION_ERROR",
        errors=errors,
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle domain validation errors. Their messages are written for clients."""
    logger.info(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    return _error_response(HTTP_422_UNPROCESSABLE_ENTITY, exc.message, exc.error_code)


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error_response(HTTP_404_NOT_FOUND, exc.message, exc.error_code)


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    logger.info(f"Authentication failed on {request.url.path}: {exc.message}")
    return _error_response(
        HTTP_401_UNAUTHORIZED,
        exc.message,
        exc.error_code,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    """Handle storage failures without exposing driver details."""
    error_id = str(uuid.uuid4())
    logger.error(
        f"Storage error {error_id} (request {_request_id(request)}): {exc.message}",
        exc_info=exc.original_exception or exc,
    )
    return _error_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        "A storage error occurred. Please try again later.",
        exc.error_code,
        error_id=error_id,
    )


async def application_error_handler(request: Request, exc: BaseApplicationError) -> JSONResponse:
    """Handle any application error without a more specific handler."""
    error_id = str(uuid.uuid4())
    logger.error(f"Application error {error_id} (request {_request_id(request)}): {exc.message}")
    return _error_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred.",
        exc.error_code,
        error_id=error_id,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle all unhandled exceptions. Details are logged, never returned."""
    error_id = str(uuid.uuid4())
    logger.error(
        f"Unhandled exception {error_id} (request {_request_id(request)}) "
        f"on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return _error_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred.",
        "INTERNAL_SERVER_ERROR",
        error_id=error_id,
    )
