"""
Questionnaire completion state machine.

An AssessmentSession is an immutable snapshot of one attempt at a
questionnaire. Every transition returns a new session, so callers (an API
handler, a mobile view model) hold state explicitly instead of sharing a
mutable object.

    NOT_STARTED --answer--> IN_PROGRESS --answer last question--> COMPLETED

Answers can be overwritten and the cursor moved freely until the last
unanswered question is answered. At that point the result is finalized and
the session becomes terminal; a retake starts a new session.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from app.domain.entities.assessment import AssessmentResult
from app.domain.entities.questionnaire import Question
from app.domain.enums.questionnaire_type import QuestionnaireType, get_questionnaire_type
from app.domain.exceptions.assessment_exceptions import (
    AssessmentAlreadyCompletedError,
    IncompleteAssessmentError,
)
from app.domain.exceptions.base_exceptions import ValidationError
from app.domain.services import scoring, self_harm
from app.domain.services.assessment_engine import build_assessment_result
from app.domain.services.questionnaire_registry import get_questionnaire


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class AssessmentSession:
    questionnaire_type: QuestionnaireType
    user_id: str
    answers: Mapping[int, int] = field(default_factory=dict)
    current_index: int = 0
    result: AssessmentResult | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))

    @classmethod
    def start(cls, questionnaire_type: QuestionnaireType | Any, user_id: str) -> "AssessmentSession":
        """Begin a fresh attempt in the NOT_STARTED state."""
        return cls(questionnaire_type=get_questionnaire_type(questionnaire_type), user_id=user_id)

    @property
    def state(self) -> SessionState:
        if self.result is not None:
            return SessionState.COMPLETED
        if not self.answers:
            return SessionState.NOT_STARTED
        return SessionState.IN_PROGRESS

    @property
    def questions(self) -> tuple[Question, ...]:
        return get_questionnaire(self.questionnaire_type).questions

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]

    @property
    def unanswered_question_ids(self) -> list[int]:
        return [q.id for q in self.questions if q.id not in self.answers]

    @property
    def running_score(self) -> int:
        """Score of the answers given so far, for progress display only."""
        return scoring.compute_score(self.answers)

    @property
    def self_harm_risk(self) -> bool:
        return self_harm.is_self_harm_risk(self.questionnaire_type, self.answers)

    def answer(self, question_id: int, value: int, at: datetime | None = None) -> "AssessmentSession":
        """
        Record (or overwrite) the answer to one question.

        Moves the cursor past the answered question. If every question now has
        an answer, the returned session is COMPLETED and carries the result.

        Raises:
            AssessmentAlreadyCompletedError: If the session is already completed
            UnknownQuestionIdError: If the question is not in this questionnaire
            InvalidAnswerValueError: If the value is not one of the options
        """
        if self.state is SessionState.COMPLETED:
            raise AssessmentAlreadyCompletedError(self.questionnaire_type.display_name)

        accepted = scoring.validate_answers(
            self.questionnaire_type, {question_id: value}, require_complete=False
        )
        answers = {**self.answers, **accepted}
        question_id = next(iter(accepted))
        answered_index = next(i for i, q in enumerate(self.questions) if q.id == question_id)
        next_index = min(answered_index + 1, self.total_questions - 1)

        result = None
        if len(answers) == self.total_questions:
            result = build_assessment_result(self.questionnaire_type, answers, self.user_id, at)
        return replace(self, answers=answers, current_index=next_index, result=result)

    def go_to(self, index: int) -> "AssessmentSession":
        """Move the cursor to a question by zero-based position."""
        if not 0 <= index < self.total_questions:
            raise ValidationError(
                f"Question position {index} is outside 0-{self.total_questions - 1}"
            )
        return replace(self, current_index=index)

    def next(self) -> "AssessmentSession":
        return replace(self, current_index=min(self.current_index + 1, self.total_questions - 1))

    def previous(self) -> "AssessmentSession":
        return replace(self, current_index=max(self.current_index - 1, 0))

    def finalize(self) -> AssessmentResult:
        """
        Return the finalized result.

        Raises:
            IncompleteAssessmentError: If any question is still unanswered
        """
        if self.result is None:
            raise IncompleteAssessmentError(
                self.questionnaire_type.display_name, self.unanswered_question_ids
            )
        return self.result
