"""
Interface for the Mood Repository.
"""
from abc import ABC, abstractmethod
from datetime import date

from app.domain.entities.mood import MoodEntry


class IMoodRepository(ABC):
    """Abstract base class defining the mood log repository interface."""

    @abstractmethod
    async def create(self, entry: MoodEntry) -> MoodEntry:
        """Store a mood log entry."""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: str) -> list[MoodEntry]:
        """List a user's mood entries, newest first."""
        pass

    @abstractmethod
    async def get_for_day(self, user_id: str, day: date) -> MoodEntry | None:
        """Retrieve the latest mood entry logged on a UTC calendar day, or None."""
        pass
