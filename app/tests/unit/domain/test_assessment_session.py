"""
Tests for the questionnaire completion state machine.
"""

import pytest

from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.exceptions import (
    AssessmentAlreadyCompletedError,
    IncompleteAssessmentError,
    InvalidAnswerValueError,
    UnknownQuestionIdError,
    ValidationError,
)
from app.domain.services.assessment_session import AssessmentSession, SessionState
from app.tests.helpers.answers import EPDS_MODERATE, PHQ9_MILD


def answer_all(session: AssessmentSession, values: list[int]) -> AssessmentSession:
    for question_id, value in enumerate(values, start=1):
        session = session.answer(question_id, value)
    return session


@pytest.fixture
def session() -> AssessmentSession:
    return AssessmentSession.start("epds", user_id="user-1")


def test_new_session_is_not_started(session: AssessmentSession):
    assert session.state is SessionState.NOT_STARTED
    assert session.questionnaire_type is QuestionnaireType.EPDS
    assert session.current_index == 0
    assert session.current_question.id == 1
    assert session.running_score == 0
    assert session.unanswered_question_ids == list(range(1, 11))


def test_first_answer_moves_to_in_progress(session: AssessmentSession):
    updated = session.answer(1, 2)

    assert updated.state is SessionState.IN_PROGRESS
    assert updated.current_index == 1
    assert updated.answered_count == 1
    assert updated.running_score == 2
    # Transitions never modify the original session
    assert session.state is SessionState.NOT_STARTED


def test_answering_every_question_completes(session: AssessmentSession):
    completed = answer_all(session, EPDS_MODERATE)

    assert completed.state is SessionState.COMPLETED
    result = completed.finalize()
    assert result.score == 11
    assert result.severity == "Moderate Risk"
    assert result.user_id == "user-1"


def test_answers_can_be_given_out_of_order():
    session = AssessmentSession.start(QuestionnaireType.PHQ9, "u")
    for question_id in reversed(range(1, 10)):
        session = session.answer(question_id, PHQ9_MILD[question_id - 1])

    assert session.state is SessionState.COMPLETED
    assert session.finalize().score == 6


def test_answers_can_be_overwritten_before_completion(session: AssessmentSession):
    session = session.answer(1, 3).answer(1, 0)

    assert session.answers == {1: 0}
    assert session.running_score == 0


def test_completed_session_rejects_more_answers(session: AssessmentSession):
    completed = answer_all(session, EPDS_MODERATE)

    with pytest.raises(AssessmentAlreadyCompletedError):
        completed.answer(1, 0)


def test_finalize_requires_every_answer(session: AssessmentSession):
    partial = answer_all(session, EPDS_MODERATE[:9])

    with pytest.raises(IncompleteAssessmentError) as exc_info:
        partial.finalize()
    assert exc_info.value.missing == [10]


def test_invalid_answers_leave_the_session_unchanged(session: AssessmentSession):
    with pytest.raises(InvalidAnswerValueError):
        session.answer(1, 7)
    with pytest.raises(UnknownQuestionIdError):
        session.answer(11, 0)
    assert session.state is SessionState.NOT_STARTED


def test_cursor_navigation(session: AssessmentSession):
    assert session.previous().current_index == 0

    moved = session.go_to(9)
    assert moved.current_question.id == 10
    assert moved.next().current_index == 9

    with pytest.raises(ValidationError):
        session.go_to(10)
    with pytest.raises(ValidationError):
        session.go_to(-1)


def test_cursor_stays_on_last_question_after_answering_it(session: AssessmentSession):
    updated = session.go_to(9).answer(10, 0)
    assert updated.current_index == 9


def test_running_self_harm_flag(session: AssessmentSession):
    assert session.answer(10, 1).self_harm_risk is True
    assert session.answer(10, 0).self_harm_risk is False
