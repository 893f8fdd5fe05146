"""
In-Memory Submission Repository Module.

Writes through the in-memory assessment, care plan and goal repositories
while holding the lock they share. A snapshot of all three is taken first and
restored if any step fails, so a submission is stored whole or not at all.
"""

import asyncio
import logging

from app.domain.entities.assessment import AssessmentResult
from app.domain.entities.care_plan import CarePlan
from app.domain.entities.goal import Goal
from app.domain.repositories.submission_repository import ISubmissionRepository
from app.infrastructure.repositories.memory.assessment_repository import (
    InMemoryAssessmentRepository,
)
from app.infrastructure.repositories.memory.care_plan_repository import InMemoryCarePlanRepository
from app.infrastructure.repositories.memory.goal_repository import InMemoryGoalRepository

logger = logging.getLogger(__name__)


class InMemorySubmissionRepository(ISubmissionRepository):
    """In-memory implementation of the submission repository."""

    def __init__(
        self,
        assessments: InMemoryAssessmentRepository,
        care_plans: InMemoryCarePlanRepository,
        goals: InMemoryGoalRepository,
        lock: asyncio.Lock,
    ) -> None:
        """
        Args:
            assessments: Assessment store, guarded by `lock`
            care_plans: Care plan store, guarded by `lock`
            goals: Goal store, guarded by `lock`
            lock: The lock all three repositories were built with
        """
        self._assessments = assessments
        self._care_plans = care_plans
        self._goals = goals
        self._lock = lock

    async def save_submission(
        self, result: AssessmentResult, care_plan: CarePlan, keep_existing_plan: bool = False
    ) -> tuple[CarePlan, bool, list[Goal]]:
        async with self._lock:
            snapshot = (
                self._assessments._snapshot(),
                self._care_plans._snapshot(),
                self._goals._snapshot(),
            )
            try:
                self._assessments._add(result)
                if keep_existing_plan:
                    existing = self._care_plans._first(result.user_id)
                    if existing is not None:
                        return existing, False, []

                stored = self._care_plans._add(care_plan)
                retired = self._goals._remove_open_template_goals(result.user_id)
                goals = self._goals._add_from_templates(result.user_id, stored.goals, stored.id)
            except Exception:
                self._assessments._restore(snapshot[0])
                self._care_plans._restore(snapshot[1])
                self._goals._restore(snapshot[2])
                logger.error(f"Submission for assessment {result.id} rolled back")
                raise

        if retired:
            logger.info(f"Replaced {retired} open goals from earlier care plans")
        return stored, True, goals
