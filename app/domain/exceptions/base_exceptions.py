"""
Base exception classes for the application.

Every domain, persistence and security error raised by the service derives
from BaseApplicationError so the presentation layer can translate them in a
single place.
"""


class BaseApplicationError(Exception):
    """Base class for all application exceptions."""

    error_code: str = "APPLICATION_ERROR"

    def __init__(self, message: str = "An application error occurred") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(BaseApplicationError):
    """Error raised when validation fails."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class AuthenticationError(BaseApplicationError):
    """Error raised when the caller cannot be identified."""

    error_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ConfigurationError(BaseApplicationError):
    """Error raised when static configuration is invalid."""

    error_code = "CONFIGURATION_ERROR"

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message)
