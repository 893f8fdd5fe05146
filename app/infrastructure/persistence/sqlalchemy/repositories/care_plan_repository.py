"""
Care plan repository implementation using SQLAlchemy.

Each stored plan gets the next `generation` number for its user. The unique
(user_id, generation) constraint turns concurrent writers into an
IntegrityError for all but one of them, which is how both the append and the
create-once paths stay consistent without table locks.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.entities.care_plan import CarePlan
from app.domain.exceptions import RepositoryError
from app.domain.repositories.care_plan_repository import ICarePlanRepository
from app.infrastructure.persistence.sqlalchemy.models.care_plan import CarePlanModel
from app.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)

logger = logging.getLogger(__name__)

FIRST_GENERATION = 1
MAX_CREATE_ATTEMPTS = 3


class SQLAlchemyCarePlanRepository(BaseSQLAlchemyRepository, ICarePlanRepository):
    """SQLAlchemy implementation of the care plan repository."""

    async def create(self, care_plan: CarePlan) -> CarePlan:
        for attempt in range(1, MAX_CREATE_ATTEMPTS + 1):
            async with self._session_factory() as session:
                try:
                    current = await session.scalar(
                        select(func.max(CarePlanModel.generation)).where(
                            CarePlanModel.user_id == care_plan.user_id
                        )
                    )
                    session.add(CarePlanModel.from_domain(care_plan, (current or 0) + 1))
                    await session.commit()
                    return care_plan
                except IntegrityError:
                    await session.rollback()
                    logger.info(f"Care plan generation conflict, retrying (attempt {attempt})")
                except SQLAlchemyError as e:
                    await session.rollback()
                    raise self._repository_error("create", e) from e
        raise RepositoryError(
            "Could not allocate a care plan generation",
            repository=type(self).__name__,
            operation="create",
        )

    async def create_if_absent(self, care_plan: CarePlan) -> tuple[CarePlan, bool]:
        async with self._session_factory() as session:
            try:
                session.add(CarePlanModel.from_domain(care_plan, FIRST_GENERATION))
                await session.commit()
                return care_plan, True
            except IntegrityError:
                await session.rollback()
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._repository_error("create_if_absent", e) from e

        existing = await self._get_generation(care_plan.user_id, FIRST_GENERATION)
        if existing is None:
            # The conflicting row must exist; anything else is a storage fault
            raise RepositoryError(
                "Care plan conflict without an existing plan",
                repository=type(self).__name__,
                operation="create_if_absent",
            )
        return existing, False

    async def get_latest_by_user_id(self, user_id: str) -> CarePlan | None:
        query = (
            select(CarePlanModel)
            .where(CarePlanModel.user_id == user_id)
            .order_by(CarePlanModel.generation.desc())
            .limit(1)
        )
        async with self._session_factory() as session:
            try:
                row = (await session.execute(query)).scalars().first()
            except SQLAlchemyError as e:
                raise self._repository_error("get_latest_by_user_id", e) from e
            return row.to_domain() if row else None

    async def _get_generation(self, user_id: str, generation: int) -> CarePlan | None:
        query = select(CarePlanModel).where(
            CarePlanModel.user_id == user_id, CarePlanModel.generation == generation
        )
        async with self._session_factory() as session:
            try:
                row = (await session.execute(query)).scalars().first()
            except SQLAlchemyError as e:
                raise self._repository_error("get_generation", e) from e
            return row.to_domain() if row else None
