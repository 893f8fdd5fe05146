"""
Exception classes for the application domain.

This module exports common exceptions used throughout the application.
"""

from app.domain.exceptions.assessment_exceptions import (
    AssessmentAlreadyCompletedError,
    AssessmentValidationError,
    IncompleteAssessmentError,
    InvalidAnswerValueError,
    InvalidQuestionnaireTypeError,
    ScoreOutOfRangeError,
    UnknownQuestionIdError,
)
from app.domain.exceptions.base_exceptions import (
    AuthenticationError,
    BaseApplicationError,
    ConfigurationError,
    ValidationError,
)
from app.domain.exceptions.persistence_exceptions import (
    EntityNotFoundError,
    PersistenceError,
    RepositoryError,
)

__all__ = [
    # Assessment exceptions
    "AssessmentAlreadyCompletedError",
    "AssessmentValidationError",
    "AuthenticationError",
    # Base exceptions
    "BaseApplicationError",
    "ConfigurationError",
    # Persistence exceptions
    "EntityNotFoundError",
    "IncompleteAssessmentError",
    "InvalidAnswerValueError",
    "InvalidQuestionnaireTypeError",
    "PersistenceError",
    "RepositoryError",
    "ScoreOutOfRangeError",
    "UnknownQuestionIdError",
    "ValidationError",
]
