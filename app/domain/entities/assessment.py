"""
Assessment entities.

An AssessmentResult is created when a user completes a questionnaire. It is
immutable: a retake produces a new result and never mutates a prior one.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from uuid import UUID, uuid4

from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.utils.datetime_utils import now_utc

# Question id -> selected option value
AnswerSet = Mapping[int, int]


@dataclass(frozen=True)
class Interpretation:
    """Severity band a score falls into."""

    severity: str
    description: str
    color_tag: str


@dataclass(frozen=True)
class Helpline:
    name: str
    phone: str


@dataclass(frozen=True)
class CrisisAdvisory:
    """
    Advisory the consuming layer must surface when the self-harm item is
    answered with a non-zero value. It cannot be dismissed by the user.
    """

    message: str
    helplines: tuple[Helpline, ...]
    dismissible: bool = False


@dataclass(frozen=True, kw_only=True)
class AssessmentResult:
    """Result of a completed screening questionnaire."""

    user_id: str
    questionnaire_type: QuestionnaireType
    score: int
    answers: AnswerSet
    severity: str
    description: str
    color_tag: str
    self_harm_risk: bool
    advisory: CrisisAdvisory | None = None
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=now_utc)

    def __post_init__(self) -> None:
        # Freeze the answer mapping so the result cannot be edited after creation
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))
