"""
Logging Utility Module.

Provides the log filter that masks contact details (e-mail addresses and
phone numbers) before a record reaches any handler.
"""

import logging
import re

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
# Eight or more digits, optionally grouped by spaces, dots or hyphens, with an
# optional leading +. ISO dates and short numbers such as 995 stay readable.
PHONE_PATTERN = re.compile(r"(?<![\w-])(?!\d{4}-\d{2}-\d{2})\+?\d(?:[\s.-]?\d){7,}(?![\w:-])")

EMAIL_MASK = "[EMAIL REDACTED]"
PHONE_MASK = "[PHONE REDACTED]"


def sanitize_text(text: str) -> str:
    """Mask e-mail addresses and phone numbers in free text."""
    text = EMAIL_PATTERN.sub(EMAIL_MASK, text)
    return PHONE_PATTERN.sub(PHONE_MASK, text)


class SanitizingFilter(logging.Filter):
    """Custom logging filter to mask contact details in log records."""

    def __init__(self, name: str = "Sanitizer"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        original_message = record.getMessage()
        sanitized_message = sanitize_text(original_message)
        if sanitized_message != original_message:
            record.msg = sanitized_message
            record.args = ()
        return True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger carrying the sanitizing filter.

    For use outside the dictConfig-managed tree (scripts, early startup).
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SanitizingFilter) for f in logger.filters):
        logger.addFilter(SanitizingFilter())
    return logger
