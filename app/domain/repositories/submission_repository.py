"""
Interface for the Submission Repository.

A submission is an assessment result stored together with the care plan and
goals it produces. The three writes succeed or fail as one unit.
"""
from abc import ABC, abstractmethod

from app.domain.entities.assessment import AssessmentResult
from app.domain.entities.care_plan import CarePlan
from app.domain.entities.goal import Goal


class ISubmissionRepository(ABC):
    """Abstract base class defining the submission repository interface."""

    @abstractmethod
    async def save_submission(
        self, result: AssessmentResult, care_plan: CarePlan, keep_existing_plan: bool = False
    ) -> tuple[CarePlan, bool, list[Goal]]:
        """Store an assessment with its care plan and goals, all or nothing.

        When a plan is stored, it becomes the user's newest plan, the open
        goals materialized from earlier plans are removed, and the plan's goal
        templates become open goals. Completed goals and custom goals are
        kept.

        With keep_existing_plan, a user who already has a plan keeps the
        first one: only the result is stored and no goals change. The check
        is atomic per user.

        Args:
            result: Finalized assessment result
            care_plan: Plan generated for the result
            keep_existing_plan: Keep the user's first plan if there is one

        Returns:
            The user's plan, whether this call stored it, and the goals it created

        Raises:
            RepositoryError: If storage fails; nothing is stored in that case
        """
        pass
