"""
Mood Service.

Daily mood logging. Notes are free text and are never logged.
"""

import logging

from app.domain.entities.mood import MoodEntry
from app.domain.enums.mood_type import MoodType
from app.domain.exceptions import EntityNotFoundError, ValidationError
from app.domain.repositories.mood_repository import IMoodRepository
from app.domain.utils.datetime_utils import today

logger = logging.getLogger(__name__)


class MoodService:
    def __init__(self, mood_repository: IMoodRepository):
        self.mood_repository = mood_repository

    async def log_mood(self, user_id: str, mood: MoodType | str, notes: str | None = None) -> MoodEntry:
        """
        Raises:
            ValidationError: If the mood is not one of the tracked moods
        """
        try:
            mood = MoodType(mood)
        except ValueError as e:
            allowed = ", ".join(m.value for m in MoodType)
            raise ValidationError(f"Unknown mood {mood!r}; expected one of {allowed}") from e
        entry = await self.mood_repository.create(
            MoodEntry(user_id=user_id, mood=mood, notes=notes or None)
        )
        logger.info(f"Logged mood entry {entry.id} ({mood.value})")
        return entry

    async def list_moods(self, user_id: str) -> list[MoodEntry]:
        return await self.mood_repository.list_by_user_id(user_id)

    async def get_today(self, user_id: str) -> MoodEntry:
        """
        Raises:
            EntityNotFoundError: If nothing was logged today (UTC)
        """
        entry = await self.mood_repository.get_for_day(user_id, today())
        if entry is None:
            raise EntityNotFoundError(message="No mood logged today")
        return entry
