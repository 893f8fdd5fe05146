"""
Maternal Wellness FastAPI Application

This is the main application entry point. The exported `app` is what Uvicorn
serves when run with "app.main:app".
"""

import logging

import uvicorn

from app.app_factory import create_application
from app.core.config.settings import get_settings

logger = logging.getLogger(__name__)

app = create_application()

if __name__ == "__main__":
    settings = get_settings()

    logger.info(
        f"Starting Uvicorn server. Host: {settings.SERVER_HOST}, Port: {settings.SERVER_PORT}, LogLevel: {settings.LOG_LEVEL.lower()}"
    )
    uvicorn.run(
        "app.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.ENVIRONMENT == "development",
        workers=settings.UVICORN_WORKERS,
    )
