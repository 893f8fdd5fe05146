"""
Care Plan Schemas Module.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.domain.entities.care_plan import CarePlan, RecommendationCategory, RecommendationItem
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.presentation.api.schemas.base import BaseModelConfig


class RecommendationResponse(BaseModelConfig):
    title: str
    description: str
    category: RecommendationCategory


class GoalTemplateResponse(BaseModelConfig):
    title: str
    description: str


def _items(items: list[RecommendationItem]) -> list[RecommendationResponse]:
    return [RecommendationResponse.model_validate(item) for item in items]


class CarePlanResponse(BaseModelConfig):
    id: UUID
    questionnaire_type: QuestionnaireType
    score: int
    mind_and_emotions: list[RecommendationResponse]
    body_and_rest: list[RecommendationResponse]
    support_and_connection: list[RecommendationResponse]
    goals: list[GoalTemplateResponse]
    date: datetime

    @classmethod
    def from_domain(cls, plan: CarePlan) -> "CarePlanResponse":
        return cls(
            id=plan.id,
            questionnaire_type=plan.questionnaire_type,
            score=plan.score,
            mind_and_emotions=_items(plan.mind_and_emotions),
            body_and_rest=_items(plan.body_and_rest),
            support_and_connection=_items(plan.support_and_connection),
            goals=[GoalTemplateResponse.model_validate(g) for g in plan.goals],
            date=plan.date,
        )


class CarePlanPreviewRequest(BaseModelConfig):
    questionnaire_type: str = Field(..., description="epds or phq9 (case-insensitive)")
    score: int = Field(..., description="Total score within the questionnaire's range")
