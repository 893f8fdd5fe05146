"""
Care plan entities.

A care plan groups self-care recommendations into three categories and
carries template goals that are materialized as user goals when the plan is
stored.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.utils.datetime_utils import now_utc


class RecommendationCategory(str, Enum):
    MIND = "mind"
    BODY = "body"
    SUPPORT = "support"


@dataclass(frozen=True)
class RecommendationItem:
    title: str
    description: str
    category: RecommendationCategory


@dataclass(frozen=True)
class GoalTemplate:
    title: str
    description: str


@dataclass(kw_only=True)
class CarePlan:
    """Care plan derived from a questionnaire type and score."""

    user_id: str
    questionnaire_type: QuestionnaireType
    score: int
    mind_and_emotions: list[RecommendationItem] = field(default_factory=list)
    body_and_rest: list[RecommendationItem] = field(default_factory=list)
    support_and_connection: list[RecommendationItem] = field(default_factory=list)
    goals: list[GoalTemplate] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=now_utc)

    @property
    def recommendations(self) -> list[RecommendationItem]:
        """All recommendation items, mind first, then body, then support."""
        return [*self.mind_and_emotions, *self.body_and_rest, *self.support_and_connection]

    def has_recommendation(self, title: str) -> bool:
        return any(item.title == title for item in self.recommendations)
