"""
Goal Schemas Module.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, StrictBool

from app.presentation.api.schemas.base import BaseModelConfig


class GoalCreateRequest(BaseModelConfig):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)


class GoalUpdateRequest(BaseModelConfig):
    completed: StrictBool = Field(..., description="New completion state")


class GoalResponse(BaseModelConfig):
    id: UUID
    title: str
    description: str | None = None
    care_plan_id: UUID | None = None
    completed: bool
    date: datetime
