"""
Domain entity representing a daily mood log entry.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from app.domain.enums.mood_type import MoodType
from app.domain.utils.datetime_utils import now_utc


@dataclass(kw_only=True)
class MoodEntry:
    user_id: str
    mood: MoodType
    notes: str | None = None
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=now_utc)
