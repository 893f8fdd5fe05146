"""
Assessment Schemas Module.

Answers are accepted either as an object keyed by question id or as an
ordered list of option values. Ids and values are validated by the
assessment engine, not here, so every answer error carries the engine's
error code.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from app.application.services.assessment_service import AssessmentProgress
from app.domain.entities.assessment import AssessmentResult, CrisisAdvisory
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.services import scoring
from app.domain.services.assessment_session import SessionState
from app.domain.services.questionnaire_registry import get_max_score
from app.domain.services.self_harm import build_crisis_advisory
from app.presentation.api.schemas.base import BaseModelConfig
from app.presentation.api.schemas.care_plan import CarePlanResponse
from app.presentation.api.schemas.goal import GoalResponse
from app.presentation.api.schemas.questionnaire import InterpretationResponse


class AssessmentRequest(BaseModelConfig):
    questionnaire_type: str = Field(..., description="epds or phq9 (case-insensitive)")
    answers: dict[str, Any] | list[Any] = Field(
        ..., description="Question id -> value, or values in question order"
    )

    def answer_mapping(self) -> Mapping[Any, Any]:
        if isinstance(self.answers, list):
            return scoring.answers_from_sequence(self.answers)
        return self.answers


class HelplineResponse(BaseModelConfig):
    name: str
    phone: str


class CrisisAdvisoryResponse(BaseModelConfig):
    message: str
    helplines: list[HelplineResponse]
    dismissible: bool = False

    @classmethod
    def from_domain(cls, advisory: CrisisAdvisory | None) -> "CrisisAdvisoryResponse | None":
        if advisory is None:
            return None
        return cls(
            message=advisory.message,
            helplines=[HelplineResponse(name=h.name, phone=h.phone) for h in advisory.helplines],
            dismissible=advisory.dismissible,
        )


class AssessmentResponse(BaseModelConfig):
    id: UUID
    questionnaire_type: QuestionnaireType
    score: int
    max_score: int
    severity: str
    description: str
    color_tag: str
    self_harm_risk: bool
    advisory: CrisisAdvisoryResponse | None = Field(
        None, description="Present whenever self_harm_risk is true; must be shown to the user"
    )
    answers: dict[int, int]
    date: datetime

    @classmethod
    def from_domain(cls, result: AssessmentResult) -> "AssessmentResponse":
        return cls(
            id=result.id,
            questionnaire_type=result.questionnaire_type,
            score=result.score,
            max_score=get_max_score(result.questionnaire_type),
            severity=result.severity,
            description=result.description,
            color_tag=result.color_tag,
            self_harm_risk=result.self_harm_risk,
            advisory=CrisisAdvisoryResponse.from_domain(result.advisory),
            answers=dict(result.answers),
            date=result.date,
        )


class AssessmentSubmissionResponse(BaseModelConfig):
    assessment: AssessmentResponse
    care_plan: CarePlanResponse
    care_plan_created: bool = Field(
        ..., description="False when an existing plan was kept (create_once policy)"
    )
    goals: list[GoalResponse] = Field(..., description="Goals created from the plan's templates")


class AssessmentPreviewResponse(BaseModelConfig):
    questionnaire_type: QuestionnaireType
    state: SessionState
    answered: int
    total: int
    score: int = Field(..., description="Running score of the answers given so far")
    self_harm_risk: bool
    advisory: CrisisAdvisoryResponse | None = None
    missing_question_ids: list[int]
    interpretation: InterpretationResponse | None = Field(
        None, description="Only present once every question is answered"
    )

    @classmethod
    def from_progress(cls, progress: AssessmentProgress) -> "AssessmentPreviewResponse":
        session = progress.session
        result = progress.result
        interpretation = None
        if result is not None:
            interpretation = InterpretationResponse(
                questionnaire_type=result.questionnaire_type,
                score=result.score,
                severity=result.severity,
                description=result.description,
                color_tag=result.color_tag,
            )
        advisory = None
        if session.self_harm_risk:
            advisory = CrisisAdvisoryResponse.from_domain(build_crisis_advisory())
        return cls(
            questionnaire_type=session.questionnaire_type,
            state=session.state,
            answered=session.answered_count,
            total=session.total_questions,
            score=session.running_score,
            self_harm_risk=session.self_harm_risk,
            advisory=advisory,
            missing_question_ids=session.unanswered_question_ids,
            interpretation=interpretation,
        )
