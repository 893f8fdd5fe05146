"""
Answer scoring and boundary validation.

`compute_score` is deliberately permissive so it can drive live progress
displays on partial answer sets. Validation of ids, values and coverage
happens separately in `validate_answers`, before any final result is built.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from app.domain.entities.assessment import AnswerSet
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.exceptions.assessment_exceptions import (
    IncompleteAssessmentError,
    InvalidAnswerValueError,
    UnknownQuestionIdError,
)
from app.domain.services.questionnaire_registry import get_questionnaire


def compute_score(answers: Mapping[Any, int]) -> int:
    """Sum of all answer values present. An empty answer set scores 0."""
    return sum(answers.values())


def answers_from_sequence(values: Iterable[int]) -> dict[int, int]:
    """Key an ordered list of answer values by question id, starting at 1."""
    return {question_id: value for question_id, value in enumerate(values, start=1)}


def _coerce_question_id(questionnaire: str, raw_id: Any) -> int:
    if isinstance(raw_id, bool):
        raise UnknownQuestionIdError(questionnaire, raw_id)
    if isinstance(raw_id, int):
        return raw_id
    if isinstance(raw_id, str) and raw_id.strip().isdigit():
        return int(raw_id.strip())
    raise UnknownQuestionIdError(questionnaire, raw_id)


def validate_answers(
    questionnaire_type: QuestionnaireType | Any,
    answers: Mapping[Any, Any],
    require_complete: bool = True,
) -> AnswerSet:
    """
    Validate an answer set against a questionnaire and normalize its keys.

    Checks run in a fixed order: question ids first, then values, then
    coverage. String keys such as "3" (JSON object keys) are accepted.

    Args:
        questionnaire_type: Questionnaire the answers belong to
        answers: Mapping of question id to selected option value
        require_complete: Whether every question must be answered

    Returns:
        A new dict keyed by integer question id, in question order

    Raises:
        InvalidQuestionnaireTypeError: If the type is unknown
        UnknownQuestionIdError: If an answer targets a question not in the set
        InvalidAnswerValueError: If a value is not one of the question's options
        IncompleteAssessmentError: If coverage is required and incomplete
    """
    questionnaire = get_questionnaire(questionnaire_type)
    name = questionnaire.type.display_name

    normalized: dict[int, Any] = {}
    for raw_id, value in answers.items():
        question_id = _coerce_question_id(name, raw_id)
        if questionnaire.get_question(question_id) is None:
            raise UnknownQuestionIdError(name, raw_id)
        normalized[question_id] = value

    for question_id, value in normalized.items():
        question = questionnaire.get_question(question_id)
        if isinstance(value, bool) or not isinstance(value, int) or value not in question.values:
            raise InvalidAnswerValueError(question_id, value)

    if require_complete:
        missing = [qid for qid in questionnaire.question_ids if qid not in normalized]
        if missing:
            raise IncompleteAssessmentError(name, missing)

    return {qid: normalized[qid] for qid in questionnaire.question_ids if qid in normalized}
