"""
Exception classes for questionnaire and assessment operations.

All of these are local validation failures: they are detected before any
score or interpretation is computed and are never retryable.
"""

from typing import Any

from app.domain.exceptions.base_exceptions import ValidationError


class AssessmentValidationError(ValidationError):
    """Base exception class for assessment input errors."""

    error_code = "ASSESSMENT_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid assessment input") -> None:
        super().__init__(message)


class InvalidQuestionnaireTypeError(AssessmentValidationError):
    """Raised when a questionnaire type is outside the supported set."""

    error_code = "INVALID_QUESTIONNAIRE_TYPE"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown questionnaire type: {value!r}")


class UnknownQuestionIdError(AssessmentValidationError):
    """Raised when an answer references a question the questionnaire lacks."""

    error_code = "UNKNOWN_QUESTION_ID"

    def __init__(self, questionnaire: str, question_id: Any) -> None:
        self.questionnaire = questionnaire
        self.question_id = question_id
        super().__init__(f"Question {question_id!r} does not exist in {questionnaire}")


class InvalidAnswerValueError(AssessmentValidationError):
    """Raised when an answer value is not one of the question's option values."""

    error_code = "INVALID_ANSWER_VALUE"

    def __init__(self, question_id: int, value: Any) -> None:
        self.question_id = question_id
        self.value = value
        super().__init__(
            f"Answer {value!r} for question {question_id} is not one of 0, 1, 2, 3"
        )


class IncompleteAssessmentError(AssessmentValidationError):
    """Raised when completion is requested without full answer coverage."""

    error_code = "INCOMPLETE_ASSESSMENT"

    def __init__(self, questionnaire: str, missing: list[int]) -> None:
        self.questionnaire = questionnaire
        self.missing = list(missing)
        super().__init__(
            f"{questionnaire} is incomplete: please answer all questions "
            f"(missing {', '.join(str(q) for q in self.missing)})"
        )


class ScoreOutOfRangeError(AssessmentValidationError):
    """Raised when a score falls outside a questionnaire's legal range."""

    error_code = "SCORE_OUT_OF_RANGE"

    def __init__(self, questionnaire: str, score: int, max_score: int) -> None:
        self.questionnaire = questionnaire
        self.score = score
        self.max_score = max_score
        super().__init__(f"Score {score} is outside the {questionnaire} range 0-{max_score}")


class AssessmentAlreadyCompletedError(AssessmentValidationError):
    """Raised when a completed assessment session receives another answer."""

    error_code = "ASSESSMENT_ALREADY_COMPLETED"

    def __init__(self, questionnaire: str) -> None:
        self.questionnaire = questionnaire
        super().__init__(f"This {questionnaire} attempt is already completed; start a retake")
