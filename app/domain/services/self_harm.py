"""
Self-harm risk flagging.

The last item of each instrument (EPDS 10, PHQ-9 9) asks directly about
thoughts of self-harm. Any non-zero answer raises the flag, whatever the total
score: nine low answers can otherwise mask an elevated answer to this item.
"""

from collections.abc import Mapping
from typing import Any

from app.domain.entities.assessment import CrisisAdvisory, Helpline
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.services.questionnaire_registry import get_self_harm_question_id
from app.domain.services.scoring import validate_answers

CRISIS_HELPLINES: tuple[Helpline, ...] = (
    Helpline(name="Institute of Mental Health's Mental Health Helpline", phone="6389-2222"),
    Helpline(name="National Care Hotline", phone="1800-202-6868"),
    Helpline(name="Emergency services", phone="995"),
)

CRISIS_MESSAGE = (
    "Your response indicates thoughts of self-harm. Please contact a healthcare "
    "provider or mental health helpline immediately. If you are in immediate "
    "danger, call 995 or go to your nearest emergency department."
)


def is_self_harm_risk(
    questionnaire_type: QuestionnaireType | Any, answers: Mapping[Any, Any]
) -> bool:
    """
    True iff the dedicated self-harm item was answered with a value above 0.

    Only that item is read, under an int key or its string form. Its value is
    validated like any other answer; the rest of the mapping is not checked.

    Raises:
        InvalidQuestionnaireTypeError: If the type is unknown
        InvalidAnswerValueError: If the self-harm answer is not one of its options
    """
    question_id = get_self_harm_question_id(questionnaire_type)
    if question_id in answers:
        value = answers[question_id]
    elif str(question_id) in answers:
        # JSON payloads may still carry string keys
        value = answers[str(question_id)]
    else:
        return False
    validated = validate_answers(questionnaire_type, {question_id: value}, require_complete=False)
    return validated[question_id] > 0


def build_crisis_advisory() -> CrisisAdvisory:
    return CrisisAdvisory(message=CRISIS_MESSAGE, helplines=CRISIS_HELPLINES)
