"""
Goal repository implementation using SQLAlchemy.
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities.care_plan import GoalTemplate
from app.domain.entities.goal import Goal
from app.domain.exceptions import EntityNotFoundError
from app.domain.repositories.goal_repository import IGoalRepository
from app.domain.utils.datetime_utils import now_utc
from app.infrastructure.persistence.sqlalchemy.models.goal import GoalModel
from app.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


class SQLAlchemyGoalRepository(BaseSQLAlchemyRepository, IGoalRepository):
    """SQLAlchemy implementation of the goal repository."""

    async def create(self, goal: Goal) -> Goal:
        async with self._session_factory() as session:
            try:
                session.add(GoalModel.from_domain(goal))
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._repository_error("create", e) from e
        return goal

    async def create_from_templates(
        self, user_id: str, templates: Sequence[GoalTemplate], care_plan_id: UUID | None
    ) -> list[Goal]:
        created_at = now_utc()
        goals = [
            Goal.from_template(template, user_id, care_plan_id, created_at) for template in templates
        ]
        async with self._session_factory() as session:
            try:
                session.add_all(
                    [GoalModel.from_domain(goal, position) for position, goal in enumerate(goals)]
                )
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._repository_error("create_from_templates", e) from e
        return goals

    async def list_by_user_id(self, user_id: str) -> list[Goal]:
        query = (
            select(GoalModel)
            .where(GoalModel.user_id == user_id)
            .order_by(GoalModel.date.asc(), GoalModel.position.asc())
        )
        async with self._session_factory() as session:
            try:
                rows = (await session.execute(query)).scalars().all()
            except SQLAlchemyError as e:
                raise self._repository_error("list_by_user_id", e) from e
            return [row.to_domain() for row in rows]

    async def set_completed(self, goal_id: UUID, user_id: str, completed: bool) -> Goal:
        async with self._session_factory() as session:
            try:
                row = await session.get(GoalModel, goal_id)
                if row is None or row.user_id != user_id:
                    raise EntityNotFoundError("Goal", str(goal_id))
                row.completed = completed
                await session.commit()
                await session.refresh(row)
                return row.to_domain()
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._repository_error("set_completed", e) from e
