"""
Assessment Engine for the Maternal Wellness platform.

Single entry point for questionnaire lookup, scoring, interpretation,
self-harm flagging and care plan generation. Every function here is pure and
synchronous; identical inputs always give identical outputs, so the engine is
safe to share between concurrent requests without locking.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from app.domain.entities.assessment import AssessmentResult, Interpretation
from app.domain.entities.care_plan import CarePlan
from app.domain.entities.questionnaire import Question
from app.domain.enums.questionnaire_type import QuestionnaireType, get_questionnaire_type
from app.domain.services import care_plan_generator, interpretation, scoring, self_harm
from app.domain.services.questionnaire_registry import get_questions
from app.domain.utils.datetime_utils import now_utc


def build_assessment_result(
    questionnaire_type: QuestionnaireType | Any,
    answers: Mapping[Any, Any],
    user_id: str,
    date: datetime | None = None,
) -> AssessmentResult:
    """
    Validate a complete answer set and build its finalized result.

    All validation happens before any computation, so a failure never leaves
    a partially computed result behind.

    Raises:
        InvalidQuestionnaireTypeError: If the type is unknown
        UnknownQuestionIdError: If an answer targets a question not in the set
        InvalidAnswerValueError: If a value is not 0-3
        IncompleteAssessmentError: If any question is unanswered
    """
    questionnaire_type = get_questionnaire_type(questionnaire_type)
    validated = scoring.validate_answers(questionnaire_type, answers, require_complete=True)

    score = scoring.compute_score(validated)
    band = interpretation.interpret(questionnaire_type, score)
    at_risk = self_harm.is_self_harm_risk(questionnaire_type, validated)

    return AssessmentResult(
        user_id=user_id,
        questionnaire_type=questionnaire_type,
        score=score,
        answers=validated,
        severity=band.severity,
        description=band.description,
        color_tag=band.color_tag,
        self_harm_risk=at_risk,
        advisory=self_harm.build_crisis_advisory() if at_risk else None,
        date=date or now_utc(),
    )


class AssessmentEngine:
    """
    Facade over the questionnaire registry, scorer, interpreter, self-harm
    flag and care plan generator.
    """

    def get_questions(self, questionnaire_type: QuestionnaireType | Any) -> tuple[Question, ...]:
        return get_questions(questionnaire_type)

    def compute_score(self, answers: Mapping[Any, int]) -> int:
        return scoring.compute_score(answers)

    def interpret(self, questionnaire_type: QuestionnaireType | Any, score: int) -> Interpretation:
        return interpretation.interpret(questionnaire_type, score)

    def is_self_harm_risk(
        self, questionnaire_type: QuestionnaireType | Any, answers: Mapping[Any, Any]
    ) -> bool:
        return self_harm.is_self_harm_risk(questionnaire_type, answers)

    def submit_assessment(
        self,
        questionnaire_type: QuestionnaireType | Any,
        answers: Mapping[Any, Any],
        user_id: str,
        date: datetime | None = None,
    ) -> AssessmentResult:
        """Finalize a complete answer set into an AssessmentResult."""
        return build_assessment_result(questionnaire_type, answers, user_id, date)

    def generate_care_plan(
        self, questionnaire_type: QuestionnaireType | Any, score: int, user_id: str = ""
    ) -> CarePlan:
        return care_plan_generator.generate_care_plan(questionnaire_type, score, user_id)
