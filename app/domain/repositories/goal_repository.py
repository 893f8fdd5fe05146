"""
Interface for the Goal Repository.
"""
from abc import ABC, abstractmethod
from collections.abc import Sequence
from uuid import UUID

from app.domain.entities.care_plan import GoalTemplate
from app.domain.entities.goal import Goal


class IGoalRepository(ABC):
    """Abstract base class defining the goal repository interface."""

    @abstractmethod
    async def create(self, goal: Goal) -> Goal:
        """Store a new goal."""
        pass

    @abstractmethod
    async def create_from_templates(
        self, user_id: str, templates: Sequence[GoalTemplate], care_plan_id: UUID | None
    ) -> list[Goal]:
        """Materialize care plan goal templates as open goals for a user.

        Args:
            user_id: Owner of the new goals
            templates: Goal templates, in plan order
            care_plan_id: Plan the goals came from

        Returns:
            The created goals, in template order
        """
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: str) -> list[Goal]:
        """List a user's goals, oldest first."""
        pass

    @abstractmethod
    async def set_completed(self, goal_id: UUID, user_id: str, completed: bool) -> Goal:
        """Set the completion flag of one of the user's goals.

        Raises:
            EntityNotFoundError: If the goal does not exist or belongs to another user
        """
        pass
