"""
Goal Service.

Custom goals and completion tracking. Template goals are created by the care
plan service when a plan is stored.
"""

import logging
from uuid import UUID

from app.domain.entities.goal import Goal
from app.domain.exceptions import ValidationError
from app.domain.repositories.goal_repository import IGoalRepository

logger = logging.getLogger(__name__)


class GoalService:
    def __init__(self, goal_repository: IGoalRepository):
        self.goal_repository = goal_repository

    async def list_goals(self, user_id: str) -> list[Goal]:
        return await self.goal_repository.list_by_user_id(user_id)

    async def create_goal(self, user_id: str, title: str, description: str | None = None) -> Goal:
        """
        Raises:
            ValidationError: If the title is blank
        """
        title = title.strip()
        if not title:
            raise ValidationError("Goal title must not be empty")
        goal = await self.goal_repository.create(
            Goal(user_id=user_id, title=title, description=description)
        )
        logger.info(f"Created goal {goal.id}")
        return goal

    async def set_completed(self, goal_id: UUID, user_id: str, completed: bool) -> Goal:
        """
        Raises:
            ValidationError: If completed is not a boolean
            EntityNotFoundError: If the goal does not exist or is not the user's
        """
        if not isinstance(completed, bool):
            raise ValidationError("completed must be a boolean")
        goal = await self.goal_repository.set_completed(goal_id, user_id, completed)
        logger.info(f"Goal {goal.id} marked {'completed' if completed else 'open'}")
        return goal
