"""
Mood Schemas Module.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.domain.enums.mood_type import MoodType
from app.presentation.api.schemas.base import BaseModelConfig


class MoodCreateRequest(BaseModelConfig):
    mood: str = Field(..., description="One of Great, Good, Okay, Sad, Anxious, Exhausted")
    notes: str | None = Field(None, max_length=2000)


class MoodResponse(BaseModelConfig):
    id: UUID
    mood: MoodType
    notes: str | None = None
    date: datetime
