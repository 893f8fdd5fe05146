"""
Questionnaire Schemas Module.

Response models for the questionnaire catalogue and score interpretation.
"""

from pydantic import Field

from app.domain.entities.assessment import Interpretation
from app.domain.entities.questionnaire import Question, Questionnaire
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.presentation.api.schemas.base import BaseModelConfig


class OptionResponse(BaseModelConfig):
    value: int = Field(..., description="Score contributed by this option (0-3)")
    label: str


class QuestionResponse(BaseModelConfig):
    id: int
    text: str
    options: list[OptionResponse] = Field(..., description="Options in display order")

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id,
            text=question.text,
            options=[OptionResponse(value=o.value, label=o.label) for o in question.options],
        )


class QuestionnaireSummary(BaseModelConfig):
    type: QuestionnaireType
    name: str = Field(..., description="Display name, e.g. PHQ-9")
    title: str
    question_count: int
    max_score: int
    self_harm_question_id: int

    @classmethod
    def from_domain(cls, questionnaire: Questionnaire) -> "QuestionnaireSummary":
        return cls(
            type=questionnaire.type,
            name=questionnaire.type.display_name,
            title=questionnaire.title,
            question_count=questionnaire.question_count,
            max_score=questionnaire.max_score,
            self_harm_question_id=questionnaire.self_harm_question_id,
        )


class QuestionnaireResponse(QuestionnaireSummary):
    questions: list[QuestionResponse]

    @classmethod
    def from_domain(cls, questionnaire: Questionnaire) -> "QuestionnaireResponse":
        summary = QuestionnaireSummary.from_domain(questionnaire)
        return cls(
            **summary.model_dump(),
            questions=[QuestionResponse.from_domain(q) for q in questionnaire.questions],
        )


class InterpretationResponse(BaseModelConfig):
    questionnaire_type: QuestionnaireType
    score: int
    severity: str
    description: str
    color_tag: str = Field(..., description="Presentation hint, e.g. success or destructive")

    @classmethod
    def from_domain(
        cls, questionnaire_type: QuestionnaireType, score: int, interpretation: Interpretation
    ) -> "InterpretationResponse":
        return cls(
            questionnaire_type=questionnaire_type,
            score=score,
            severity=interpretation.severity,
            description=interpretation.description,
            color_tag=interpretation.color_tag,
        )
