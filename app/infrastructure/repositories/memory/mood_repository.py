"""
In-Memory Mood Repository Module.
"""

import asyncio
from collections import defaultdict
from dataclasses import replace
from datetime import date

from app.domain.entities.mood import MoodEntry
from app.domain.repositories.mood_repository import IMoodRepository
from app.domain.utils.datetime_utils import day_bounds, to_utc


class InMemoryMoodRepository(IMoodRepository):
    """In-memory implementation of the mood log repository."""

    def __init__(self) -> None:
        self._entries: dict[str, list[MoodEntry]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def create(self, entry: MoodEntry) -> MoodEntry:
        async with self._lock:
            self._entries[entry.user_id].append(replace(entry))
        return replace(entry)

    async def list_by_user_id(self, user_id: str) -> list[MoodEntry]:
        async with self._lock:
            stored = [replace(e) for e in reversed(self._entries.get(user_id, []))]
        return sorted(stored, key=lambda e: to_utc(e.date), reverse=True)

    async def get_for_day(self, user_id: str, day: date) -> MoodEntry | None:
        start, end = day_bounds(day)
        for entry in await self.list_by_user_id(user_id):
            if start <= to_utc(entry.date) < end:
                return entry
        return None
