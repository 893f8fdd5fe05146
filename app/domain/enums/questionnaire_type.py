"""
Questionnaire Type Enum.

Defines the validated screening instruments supported by the assessment engine.
"""

from enum import Enum
from typing import Any

from app.domain.exceptions.assessment_exceptions import InvalidQuestionnaireTypeError


class QuestionnaireType(str, Enum):
    """Screening questionnaires available to users."""

    EPDS = "epds"  # Edinburgh Postnatal Depression Scale, 10 items
    PHQ9 = "phq9"  # Patient Health Questionnaire, 9 items

    @property
    def display_name(self) -> str:
        return "EPDS" if self is QuestionnaireType.EPDS else "PHQ-9"


def get_questionnaire_type(value: Any) -> QuestionnaireType:
    """
    Resolve a questionnaire type from an enum member or external string.

    Matching ignores case, surrounding whitespace, hyphens and underscores,
    so "EPDS", "phq9" and "PHQ-9" are all accepted.

    Raises:
        InvalidQuestionnaireTypeError: If the value names no known questionnaire
    """
    if isinstance(value, QuestionnaireType):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("-", "").replace("_", "")
        for questionnaire_type in QuestionnaireType:
            if questionnaire_type.value == normalized:
                return questionnaire_type
    raise InvalidQuestionnaireTypeError(value)
