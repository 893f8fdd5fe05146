"""
SQLAlchemy model for Goal entities.
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.entities.goal import Goal
from app.infrastructure.persistence.sqlalchemy.models.base import Base, UserOwnedMixin
from app.infrastructure.persistence.sqlalchemy.types import GUID


class GoalModel(UserOwnedMixin, Base):
    """SQLAlchemy model for the Goal entity, mapped to the 'goals' table."""

    __tablename__ = "goals"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    care_plan_id: Mapped[uuid.UUID | None] = mapped_column(
        GUID(), ForeignKey("care_plans.id", ondelete="SET NULL"), nullable=True
    )
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Tie-breaker for goals created together from one plan's templates
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Goal(id={self.id}, completed={self.completed})>"

    @classmethod
    def from_domain(cls, goal: Goal, position: int = 0) -> "GoalModel":
        return cls(
            id=goal.id,
            user_id=goal.user_id,
            date=goal.date,
            title=goal.title,
            description=goal.description,
            care_plan_id=goal.care_plan_id,
            completed=goal.completed,
            position=position,
        )

    def to_domain(self) -> Goal:
        return Goal(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            title=self.title,
            description=self.description,
            care_plan_id=self.care_plan_id,
            completed=self.completed,
        )
