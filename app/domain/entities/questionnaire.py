"""
Questionnaire entities.

Questions and their answer options are static configuration: they are built
once at import time and never mutated.
"""

from dataclasses import dataclass

from app.domain.enums.questionnaire_type import QuestionnaireType


@dataclass(frozen=True)
class Option:
    """A selectable answer. `value` is the score contributed by the option."""

    value: int
    label: str


@dataclass(frozen=True)
class Question:
    """A single questionnaire item, options kept in display order."""

    id: int  # 1-based, order-significant
    text: str
    options: tuple[Option, ...]

    @property
    def values(self) -> frozenset[int]:
        return frozenset(option.value for option in self.options)

    def label_for(self, value: int) -> str | None:
        for option in self.options:
            if option.value == value:
                return option.label
        return None


@dataclass(frozen=True)
class Questionnaire:
    """A complete question set for one instrument."""

    type: QuestionnaireType
    title: str
    questions: tuple[Question, ...]
    self_harm_question_id: int

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def question_ids(self) -> tuple[int, ...]:
        return tuple(question.id for question in self.questions)

    @property
    def max_score(self) -> int:
        return sum(max(question.values) for question in self.questions)

    def get_question(self, question_id: int) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None
