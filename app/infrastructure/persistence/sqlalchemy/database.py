"""
SQLAlchemy database access module.

Creates the async engine and session factory used by the SQLAlchemy
repositories, and creates the schema on startup.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.domain.exceptions import PersistenceError
from app.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    In-memory SQLite databases live inside a single connection, so they get
    a StaticPool to share that connection across sessions.
    """
    engine_args: dict = {"echo": echo, "future": True}
    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            engine_args["poolclass"] = StaticPool
    else:
        engine_args["pool_pre_ping"] = True
    return create_async_engine(database_url, **engine_args)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories map rows to domain objects before the session closes, so
    # attributes never need to be reloaded after commit.
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_database(engine: AsyncEngine) -> None:
    """
    Create all tables that do not exist yet.

    Raises:
        PersistenceError: If the schema cannot be created
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        logger.critical(f"Failed to create database schema: {e}", exc_info=True)
        raise PersistenceError("Failed to create database schema", original_exception=e) from e
    logger.info("Database schema ready")
