"""
Repository factory.

Selects the storage backend named by STORAGE_BACKEND and owns the lifetime
of whatever it opens (the SQLAlchemy engine, for the sqlalchemy backend).
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config.settings import Settings
from app.domain.exceptions import ConfigurationError
from app.domain.repositories import (
    IAssessmentRepository,
    ICarePlanRepository,
    IGoalRepository,
    IMoodRepository,
    ISubmissionRepository,
)
from app.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
    init_database,
)
from app.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyAssessmentRepository,
    SQLAlchemyCarePlanRepository,
    SQLAlchemyGoalRepository,
    SQLAlchemyMoodRepository,
    SQLAlchemySubmissionRepository,
)
from app.infrastructure.repositories.memory import (
    InMemoryAssessmentRepository,
    InMemoryCarePlanRepository,
    InMemoryGoalRepository,
    InMemoryMoodRepository,
    InMemorySubmissionRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class RepositoryBundle:
    assessments: IAssessmentRepository
    care_plans: ICarePlanRepository
    goals: IGoalRepository
    moods: IMoodRepository
    submissions: ISubmissionRepository


def create_memory_repositories() -> RepositoryBundle:
    # One lock across the stores a submission writes to
    lock = asyncio.Lock()
    assessments = InMemoryAssessmentRepository(lock)
    care_plans = InMemoryCarePlanRepository(lock)
    goals = InMemoryGoalRepository(lock)
    return RepositoryBundle(
        assessments=assessments,
        care_plans=care_plans,
        goals=goals,
        moods=InMemoryMoodRepository(),
        submissions=InMemorySubmissionRepository(assessments, care_plans, goals, lock),
    )


def create_sqlalchemy_repositories(
    session_factory: async_sessionmaker[AsyncSession],
) -> RepositoryBundle:
    return RepositoryBundle(
        assessments=SQLAlchemyAssessmentRepository(session_factory),
        care_plans=SQLAlchemyCarePlanRepository(session_factory),
        goals=SQLAlchemyGoalRepository(session_factory),
        moods=SQLAlchemyMoodRepository(session_factory),
        submissions=SQLAlchemySubmissionRepository(session_factory),
    )


@asynccontextmanager
async def open_repositories(settings: Settings) -> AsyncIterator[RepositoryBundle]:
    """
    Open the configured backend for the duration of the context.

    Raises:
        ConfigurationError: If STORAGE_BACKEND names an unknown backend
    """
    backend = settings.STORAGE_BACKEND
    if backend == "memory":
        logger.info("Using in-memory storage; data is lost on shutdown")
        yield create_memory_repositories()
        return
    if backend != "sqlalchemy":
        raise ConfigurationError(f"Unknown storage backend: {backend}")

    engine = create_engine(settings.ASYNC_DATABASE_URL, echo=settings.DB_ECHO_LOG)
    try:
        await init_database(engine)
        logger.info(f"Using SQLAlchemy storage ({engine.url.render_as_string(hide_password=True)})")
        yield create_sqlalchemy_repositories(create_session_factory(engine))
    finally:
        await engine.dispose()
        logger.info("Database engine disposed")
