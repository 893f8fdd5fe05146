"""
Submission repository implementation using SQLAlchemy.

The assessment row, the care plan row and the goal changes share one session
and one commit. A generation conflict on the care plan (another submission
for the same user committed first) rolls everything back and the whole
submission is retried against the new state.
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.entities.assessment import AssessmentResult
from app.domain.entities.care_plan import CarePlan
from app.domain.entities.goal import Goal
from app.domain.exceptions import RepositoryError
from app.domain.repositories.submission_repository import ISubmissionRepository
from app.domain.utils.datetime_utils import now_utc
from app.infrastructure.persistence.sqlalchemy.models.assessment import AssessmentModel
from app.infrastructure.persistence.sqlalchemy.models.care_plan import CarePlanModel
from app.infrastructure.persistence.sqlalchemy.models.goal import GoalModel
from app.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)
from app.infrastructure.persistence.sqlalchemy.repositories.care_plan_repository import (
    MAX_CREATE_ATTEMPTS,
)

logger = logging.getLogger(__name__)


class SQLAlchemySubmissionRepository(BaseSQLAlchemyRepository, ISubmissionRepository):
    """SQLAlchemy implementation of the submission repository."""

    async def save_submission(
        self, result: AssessmentResult, care_plan: CarePlan, keep_existing_plan: bool = False
    ) -> tuple[CarePlan, bool, list[Goal]]:
        user_id = result.user_id
        for attempt in range(1, MAX_CREATE_ATTEMPTS + 1):
            async with self._session_factory() as session:
                try:
                    session.add(AssessmentModel.from_domain(result))
                    current = await session.scalar(
                        select(func.max(CarePlanModel.generation)).where(
                            CarePlanModel.user_id == user_id
                        )
                    )

                    if keep_existing_plan and current is not None:
                        first = (
                            await session.execute(
                                select(CarePlanModel)
                                .where(CarePlanModel.user_id == user_id)
                                .order_by(CarePlanModel.generation.asc())
                                .limit(1)
                            )
                        ).scalars().one()
                        existing = first.to_domain()
                        await session.commit()
                        return existing, False, []

                    session.add(CarePlanModel.from_domain(care_plan, (current or 0) + 1))
                    retired = await session.execute(
                        delete(GoalModel).where(
                            GoalModel.user_id == user_id,
                            GoalModel.care_plan_id.is_not(None),
                            GoalModel.completed.is_(False),
                        )
                    )
                    created_at = now_utc()
                    goals = [
                        Goal.from_template(template, user_id, care_plan.id, created_at)
                        for template in care_plan.goals
                    ]
                    session.add_all(
                        [GoalModel.from_domain(goal, pos) for pos, goal in enumerate(goals)]
                    )
                    await session.commit()
                except IntegrityError:
                    await session.rollback()
                    logger.info(
                        f"Care plan generation conflict, retrying submission (attempt {attempt})"
                    )
                    continue
                except SQLAlchemyError as e:
                    await session.rollback()
                    raise self._repository_error("save_submission", e) from e

            if retired.rowcount:
                logger.info(f"Replaced {retired.rowcount} open goals from earlier care plans")
            return care_plan, True, goals

        raise RepositoryError(
            "Could not allocate a care plan generation",
            repository=type(self).__name__,
            operation="save_submission",
        )
