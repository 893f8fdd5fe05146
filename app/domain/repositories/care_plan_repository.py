"""
Interface for the Care Plan Repository.
"""
from abc import ABC, abstractmethod

from app.domain.entities.care_plan import CarePlan


class ICarePlanRepository(ABC):
    """Abstract base class defining the care plan repository interface."""

    @abstractmethod
    async def create(self, care_plan: CarePlan) -> CarePlan:
        """Store a new care plan, keeping any earlier plans for the user."""
        pass

    @abstractmethod
    async def create_if_absent(self, care_plan: CarePlan) -> tuple[CarePlan, bool]:
        """Store a care plan only if the user has none yet.

        The check and the insert are atomic per user: two concurrent first
        submissions produce exactly one stored plan.

        Args:
            care_plan: Candidate plan

        Returns:
            The user's plan and whether it was created by this call
        """
        pass

    @abstractmethod
    async def get_latest_by_user_id(self, user_id: str) -> CarePlan | None:
        """Retrieve the most recently stored care plan for a user, or None."""
        pass
