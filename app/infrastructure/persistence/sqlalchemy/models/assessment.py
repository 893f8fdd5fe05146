"""
SQLAlchemy model for AssessmentResult entities.

This module defines the SQLAlchemy ORM model for completed screening
questionnaires, mapping the domain entity to the database schema.
"""

from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.entities.assessment import AssessmentResult
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.services.self_harm import build_crisis_advisory
from app.infrastructure.persistence.sqlalchemy.models.base import Base, UserOwnedMixin


class AssessmentModel(UserOwnedMixin, Base):
    """
    SQLAlchemy model for the AssessmentResult entity.

    Maps to the 'assessments' table. Rows are insert-only; a retake is a new
    row. The crisis advisory is not stored: it is rebuilt from the flag.
    """

    __tablename__ = "assessments"

    questionnaire_type: Mapped[str] = mapped_column(String(16), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    # JSON object keys are strings; converted back to int question ids on load
    answers: Mapped[dict] = mapped_column(JSON(), nullable=False)
    severity: Mapped[str] = mapped_column(String(64), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    color_tag: Mapped[str] = mapped_column(String(32), nullable=False)
    self_harm_risk: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return (
            f"<Assessment(id={self.id}, type={self.questionnaire_type}, "
            f"self_harm_risk={self.self_harm_risk})>"
        )

    @classmethod
    def from_domain(cls, result: AssessmentResult) -> "AssessmentModel":
        return cls(
            id=result.id,
            user_id=result.user_id,
            date=result.date,
            questionnaire_type=result.questionnaire_type.value,
            score=result.score,
            answers={str(qid): value for qid, value in result.answers.items()},
            severity=result.severity,
            description=result.description,
            color_tag=result.color_tag,
            self_harm_risk=result.self_harm_risk,
        )

    def to_domain(self) -> AssessmentResult:
        answers = {int(qid): value for qid, value in self.answers.items()}
        return AssessmentResult(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            questionnaire_type=QuestionnaireType(self.questionnaire_type),
            score=self.score,
            answers=dict(sorted(answers.items())),
            severity=self.severity,
            description=self.description,
            color_tag=self.color_tag,
            self_harm_risk=self.self_harm_risk,
            advisory=build_crisis_advisory() if self.self_harm_risk else None,
        )
