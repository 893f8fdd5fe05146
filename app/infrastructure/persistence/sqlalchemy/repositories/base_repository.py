"""
Base SQLAlchemy repository implementation.

Repositories hold an `async_sessionmaker` and open one short-lived session
per operation, committing before they return. Database failures are logged
and re-raised as RepositoryError so the presentation layer never sees
driver-specific exceptions.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class BaseSQLAlchemyRepository:
    """Common session handling for the SQLAlchemy repositories."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize the repository with a SQLAlchemy session factory.

        Args:
            session_factory: The SQLAlchemy async session factory to create sessions.
        """
        self._session_factory = session_factory

    def _repository_error(self, operation: str, exc: SQLAlchemyError) -> RepositoryError:
        repository = type(self).__name__
        logger.error(f"Database error in {repository}.{operation}: {exc}")
        return RepositoryError(
            "Database operation failed",
            repository=repository,
            operation=operation,
            original_exception=exc,
        )
