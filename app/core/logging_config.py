"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
application. Every handler runs the sanitizing filter, so contact details a
user types into free-text fields are never written out in plain text.
"""

import copy
import logging
import logging.config
import os
from pathlib import Path
from typing import Any

# Get log level from environment or default to INFO
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "filters": {
        "sanitizer": {
            "()": "app.core.utils.logging.SanitizingFilter",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "filters": ["sanitizer"],
            "stream": "ext://sys.stdout",
        },
        "file_handler": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LOG_LEVEL,
            "formatter": "detailed",
            "filters": ["sanitizer"],
            "filename": str(LOG_DIR / "app.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 10,
            "encoding": "utf8",
            "delay": True,
        },
    },
    "loggers": {
        "app": {
            "level": LOG_LEVEL,
            "handlers": ["console", "file_handler"],
            "propagate": False,
        },
        "uvicorn": {
            "level": LOG_LEVEL,
            "handlers": ["console", "file_handler"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": "WARNING",  # Set to INFO for SQL query logging
            "handlers": ["console", "file_handler"],
            "propagate": False,
        },
    },
    "root": {
        "level": LOG_LEVEL,
        "handlers": ["console"],
    },
}

LOGGING_CONFIG = copy.deepcopy(LOGGING_CONFIG_BASE)


def build_logging_config(level: str, log_dir: Path | None = None) -> dict[str, Any]:
    """Return a copy of the base configuration at the given level."""
    config = copy.deepcopy(LOGGING_CONFIG_BASE)
    for handler in config["handlers"].values():
        handler["level"] = level
    for logger_name in ("app", "uvicorn"):
        config["loggers"][logger_name]["level"] = level
    config["root"]["level"] = level
    if log_dir is not None:
        config["handlers"]["file_handler"]["filename"] = str(log_dir / "app.log")
    return config


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary to use instead of the default
    """
    if config is None:
        config = LOGGING_CONFIG

    file_path = config["handlers"]["file_handler"]["filename"]
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
