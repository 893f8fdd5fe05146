"""
Assessment repository implementation using SQLAlchemy.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities.assessment import AssessmentResult
from app.domain.repositories.assessment_repository import IAssessmentRepository
from app.infrastructure.persistence.sqlalchemy.models.assessment import AssessmentModel
from app.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


class SQLAlchemyAssessmentRepository(BaseSQLAlchemyRepository, IAssessmentRepository):
    """SQLAlchemy implementation of the assessment result repository."""

    async def create(self, result: AssessmentResult) -> AssessmentResult:
        async with self._session_factory() as session:
            try:
                session.add(AssessmentModel.from_domain(result))
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._repository_error("create", e) from e
        return result

    async def get_latest_by_user_id(self, user_id: str) -> AssessmentResult | None:
        results = await self._list(user_id, limit=1)
        return results[0] if results else None

    async def list_by_user_id(self, user_id: str) -> list[AssessmentResult]:
        return await self._list(user_id)

    async def _list(self, user_id: str, limit: int | None = None) -> list[AssessmentResult]:
        query = (
            select(AssessmentModel)
            .where(AssessmentModel.user_id == user_id)
            .order_by(AssessmentModel.date.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        async with self._session_factory() as session:
            try:
                rows = (await session.execute(query)).scalars().all()
            except SQLAlchemyError as e:
                raise self._repository_error("list_by_user_id", e) from e
            return [row.to_domain() for row in rows]
