"""
SQLAlchemy model for CarePlan entities.
"""

from typing import Any

from sqlalchemy import JSON, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.entities.care_plan import (
    CarePlan,
    GoalTemplate,
    RecommendationCategory,
    RecommendationItem,
)
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.infrastructure.persistence.sqlalchemy.models.base import Base, UserOwnedMixin

SECTIONS = ("mind_and_emotions", "body_and_rest", "support_and_connection")


class CarePlanModel(UserOwnedMixin, Base):
    """
    SQLAlchemy model for the CarePlan entity.

    Maps to the 'care_plans' table. `generation` numbers a user's plans from
    1; the unique (user_id, generation) pair is what makes "create only if
    absent" atomic across concurrent writers.
    """

    __tablename__ = "care_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "generation", name="uq_care_plans_user_id_generation"),
    )

    generation: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    questionnaire_type: Mapped[str] = mapped_column(String(16), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    plan: Mapped[dict] = mapped_column(JSON(), nullable=False)

    def __repr__(self) -> str:
        return f"<CarePlan(id={self.id}, generation={self.generation})>"

    @classmethod
    def from_domain(cls, care_plan: CarePlan, generation: int) -> "CarePlanModel":
        plan: dict[str, Any] = {
            section: [
                {
                    "title": item.title,
                    "description": item.description,
                    "category": item.category.value,
                }
                for item in getattr(care_plan, section)
            ]
            for section in SECTIONS
        }
        plan["goals"] = [
            {"title": goal.title, "description": goal.description} for goal in care_plan.goals
        ]
        return cls(
            id=care_plan.id,
            user_id=care_plan.user_id,
            date=care_plan.date,
            generation=generation,
            questionnaire_type=care_plan.questionnaire_type.value,
            score=care_plan.score,
            plan=plan,
        )

    def to_domain(self) -> CarePlan:
        sections = {
            section: [
                RecommendationItem(
                    title=item["title"],
                    description=item["description"],
                    category=RecommendationCategory(item["category"]),
                )
                for item in self.plan.get(section, [])
            ]
            for section in SECTIONS
        }
        return CarePlan(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            questionnaire_type=QuestionnaireType(self.questionnaire_type),
            score=self.score,
            goals=[GoalTemplate(g["title"], g["description"]) for g in self.plan.get("goals", [])],
            **sections,
        )
