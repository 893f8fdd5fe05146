"""
SQLAlchemy persistence implementation for the Maternal Wellness API.

This package provides the async engine helpers, ORM models and repository
implementations backing the `sqlalchemy` storage backend.
"""

from app.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
    init_database,
)
from app.infrastructure.persistence.sqlalchemy.models import Base

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "init_database",
]
