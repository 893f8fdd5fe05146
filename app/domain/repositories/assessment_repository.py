"""
Interface for the Assessment Repository.
"""
from abc import ABC, abstractmethod

from app.domain.entities.assessment import AssessmentResult


class IAssessmentRepository(ABC):
    """Abstract base class defining the assessment result repository interface."""

    @abstractmethod
    async def create(self, result: AssessmentResult) -> AssessmentResult:
        """Persist a finalized assessment result.

        Args:
            result: Completed assessment to store

        Returns:
            The stored assessment result
        """
        pass

    @abstractmethod
    async def get_latest_by_user_id(self, user_id: str) -> AssessmentResult | None:
        """Retrieve the most recent assessment for a user, or None."""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: str) -> list[AssessmentResult]:
        """List a user's assessments, newest first."""
        pass
