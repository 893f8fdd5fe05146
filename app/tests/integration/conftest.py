"""
Fixtures for the SQLAlchemy integration tests.

Each test gets its own in-memory SQLite database with the schema created.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_factory,
    init_database,
)
from app.infrastructure.repositories.factory import (
    RepositoryBundle,
    create_sqlalchemy_repositories,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(TEST_DATABASE_URL)
    await init_database(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(db_engine)


@pytest_asyncio.fixture
async def sql_repositories(
    session_factory: async_sessionmaker[AsyncSession],
) -> RepositoryBundle:
    return create_sqlalchemy_repositories(session_factory)
