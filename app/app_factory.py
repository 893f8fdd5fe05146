"""
Application Factory Module.

This module contains the factory function for creating a FastAPI application
with all necessary middleware, routers, and dependencies.
"""

# Standard Library Imports
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

# Third-Party Imports
import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Application-Specific Imports
from app.core.config import Settings
from app.core.config.settings import get_settings
from app.core.logging_config import build_logging_config, setup_logging
from app.infrastructure.repositories.factory import open_repositories
from app.infrastructure.security.jwt import get_jwt_service
from app.presentation.api.exception_handlers import register_exception_handlers
from app.presentation.api.v1.api_router import api_v1_router
from app.presentation.middleware import LoggingMiddleware, RequestIdMiddleware

logger = logging.getLogger(__name__)


# --- Helper Functions ---


def _initialize_sentry(settings: Settings) -> None:
    """Initializes Sentry if DSN is provided."""
    if not settings.SENTRY_DSN:
        logger.info("Sentry DSN not provided, skipping Sentry initialization.")
        return

    logger.info("Sentry DSN found, initializing Sentry.")
    sentry_sdk.init(
        dsn=str(settings.SENTRY_DSN),
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        environment=settings.ENVIRONMENT,
        release=settings.API_VERSION,
        # Answers and notes travel in request bodies
        send_default_pii=False,
    )


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application.

    Opens the configured storage backend on startup, publishes the
    repositories on app.state and releases them on shutdown.
    """
    current_settings: Settings = fastapi_app.state.settings
    logger.info(f"Starting up ({current_settings.ENVIRONMENT}, storage={current_settings.STORAGE_BACKEND})")

    _initialize_sentry(current_settings)

    async with open_repositories(current_settings) as repositories:
        fastapi_app.state.repositories = repositories
        logger.info("Application startup complete")
        try:
            yield
        finally:
            logger.info("Application is shutting down")
            fastapi_app.state.repositories = None


def create_application(settings_override: Settings | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings_override: Settings to use instead of the global instance.
            Tests pass their own to select the storage backend.

    Returns:
        A configured FastAPI application
    """
    current_settings = settings_override or get_settings()

    setup_logging(build_logging_config(current_settings.LOG_LEVEL))
    logger.info(f"Creating application for environment: {current_settings.ENVIRONMENT}")

    app_instance = FastAPI(
        title=current_settings.API_TITLE,
        description=current_settings.API_DESCRIPTION,
        version=current_settings.API_VERSION,
        openapi_url=f"{current_settings.API_V1_STR}/openapi.json",
        debug=current_settings.DEBUG,
        lifespan=lifespan,
    )

    app_instance.state.settings = current_settings
    app_instance.state.jwt_service = get_jwt_service(current_settings)
    app_instance.state.repositories = None

    register_exception_handlers(app_instance)

    # Middleware added last runs first, so the request id exists before logging
    if current_settings.CORS_ORIGINS:
        app_instance.add_middleware(
            CORSMiddleware,
            allow_origins=current_settings.CORS_ORIGINS,
            allow_credentials=current_settings.CORS_ALLOW_CREDENTIALS,
            allow_methods=current_settings.CORS_ALLOW_METHODS,
            allow_headers=current_settings.CORS_ALLOW_HEADERS,
        )
    app_instance.add_middleware(LoggingMiddleware)
    app_instance.add_middleware(RequestIdMiddleware)

    app_instance.include_router(api_v1_router, prefix=current_settings.API_V1_STR)
    logger.info(f"API router included with prefix {current_settings.API_V1_STR}")

    return app_instance
