"""
Mood repository implementation using SQLAlchemy.
"""

from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities.mood import MoodEntry
from app.domain.repositories.mood_repository import IMoodRepository
from app.domain.utils.datetime_utils import day_bounds
from app.infrastructure.persistence.sqlalchemy.models.mood import MoodModel
from app.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


class SQLAlchemyMoodRepository(BaseSQLAlchemyRepository, IMoodRepository):
    """SQLAlchemy implementation of the mood log repository."""

    async def create(self, entry: MoodEntry) -> MoodEntry:
        async with self._session_factory() as session:
            try:
                session.add(MoodModel.from_domain(entry))
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._repository_error("create", e) from e
        return entry

    async def list_by_user_id(self, user_id: str) -> list[MoodEntry]:
        query = (
            select(MoodModel).where(MoodModel.user_id == user_id).order_by(MoodModel.date.desc())
        )
        async with self._session_factory() as session:
            try:
                rows = (await session.execute(query)).scalars().all()
            except SQLAlchemyError as e:
                raise self._repository_error("list_by_user_id", e) from e
            return [row.to_domain() for row in rows]

    async def get_for_day(self, user_id: str, day: date) -> MoodEntry | None:
        start, end = day_bounds(day)
        query = (
            select(MoodModel)
            .where(MoodModel.user_id == user_id, MoodModel.date >= start, MoodModel.date < end)
            .order_by(MoodModel.date.desc())
            .limit(1)
        )
        async with self._session_factory() as session:
            try:
                row = (await session.execute(query)).scalars().first()
            except SQLAlchemyError as e:
                raise self._repository_error("get_for_day", e) from e
            return row.to_domain() if row else None
