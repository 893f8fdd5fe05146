"""
Questionnaire Registry for the Maternal Wellness platform.

Holds the two validated screening instruments (EPDS and PHQ-9) as static
configuration and exposes them by QuestionnaireType. The value attached to
each option label is canonical; display order only matters to the client.
EPDS items 3 and 5-10 are reverse-keyed on paper, so their options are listed
from the highest value down.
"""

import logging
from typing import Any

from app.domain.entities.questionnaire import Option, Question, Questionnaire
from app.domain.enums.questionnaire_type import QuestionnaireType, get_questionnaire_type
from app.domain.exceptions.base_exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_OPTION_VALUES = frozenset({0, 1, 2, 3})

EXPECTED_QUESTION_COUNTS: dict[QuestionnaireType, int] = {
    QuestionnaireType.EPDS: 10,
    QuestionnaireType.PHQ9: 9,
}


def _ascending(*labels: str) -> tuple[Option, ...]:
    return tuple(Option(value=value, label=label) for value, label in enumerate(labels))


def _descending(*labels: str) -> tuple[Option, ...]:
    return tuple(Option(value=3 - index, label=label) for index, label in enumerate(labels))


_PHQ9_FREQUENCY = _ascending(
    "Not at all",
    "Several days",
    "More than half the days",
    "Nearly every day",
)

EPDS_QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        text="I have been able to laugh and see the funny side of things",
        options=_ascending(
            "As much as I always could",
            "Not quite so much now",
            "Definitely not so much now",
            "Not at all",
        ),
    ),
    Question(
        id=2,
        text="I have looked forward with enjoyment to things",
        options=_ascending(
            "As much as I ever did",
            "Rather less than I used to",
            "Definitely less than I used to",
            "Hardly at all",
        ),
    ),
    Question(
        id=3,
        text="I have blamed myself unnecessarily when things went wrong",
        options=_descending(
            "Yes, most of the time",
            "Yes, some of the time",
            "Not very often",
            "No, never",
        ),
    ),
    Question(
        id=4,
        text="I have been anxious or worried for no good reason",
        options=_ascending(
            "No, not at all",
            "Hardly ever",
            "Yes, sometimes",
            "Yes, very often",
        ),
    ),
    Question(
        id=5,
        text="I have felt scared or panicky for no very good reason",
        options=_descending(
            "Yes, quite a lot",
            "Yes, sometimes",
            "No, not much",
            "No, not at all",
        ),
    ),
    Question(
        id=6,
        text="Things have been getting on top of me",
        options=_descending(
            "Yes, most of the time I haven't been able to cope at all",
            "Yes, sometimes I haven't been coping as well as usual",
            "No, most of the time I have coped quite well",
            "No, I have been coping as well as ever",
        ),
    ),
    Question(
        id=7,
        text="I have been so unhappy that I have had difficulty sleeping",
        options=_descending(
            "Yes, most of the time",
            "Yes, sometimes",
            "Not very often",
            "No, not at all",
        ),
    ),
    Question(
        id=8,
        text="I have felt sad or miserable",
        options=_descending(
            "Yes, most of the time",
            "Yes, quite often",
            "Not very often",
            "No, not at all",
        ),
    ),
    Question(
        id=9,
        text="I have been so unhappy that I have been crying",
        options=_descending(
            "Yes, most of the time",
            "Yes, quite often",
            "Only occasionally",
            "No, never",
        ),
    ),
    Question(
        id=10,
        text="The thought of harming myself has occurred to me",
        options=_descending(
            "Yes, quite often",
            "Sometimes",
            "Hardly ever",
            "Never",
        ),
    ),
)

PHQ9_QUESTIONS: tuple[Question, ...] = tuple(
    Question(id=index, text=text, options=_PHQ9_FREQUENCY)
    for index, text in enumerate(
        (
            "Little interest or pleasure in doing things",
            "Feeling down, depressed, or hopeless",
            "Trouble falling or staying asleep, or sleeping too much",
            "Feeling tired or having little energy",
            "Poor appetite or overeating",
            "Feeling bad about yourself, or that you are a failure or have let "
            "yourself or your family down",
            "Trouble concentrating on things, such as reading the newspaper or "
            "watching television",
            "Moving or speaking so slowly that other people could have noticed, or "
            "the opposite: being so fidgety or restless that you have been moving "
            "around a lot more than usual",
            "Thoughts that you would be better off dead or of hurting yourself in "
            "some way",
        ),
        start=1,
    )
)

QUESTIONNAIRES: dict[QuestionnaireType, Questionnaire] = {
    QuestionnaireType.EPDS: Questionnaire(
        type=QuestionnaireType.EPDS,
        title="Edinburgh Postnatal Depression Scale",
        questions=EPDS_QUESTIONS,
        self_harm_question_id=10,
    ),
    QuestionnaireType.PHQ9: Questionnaire(
        type=QuestionnaireType.PHQ9,
        title="Patient Health Questionnaire (PHQ-9)",
        questions=PHQ9_QUESTIONS,
        self_harm_question_id=9,
    ),
}


def _validate_definitions(questionnaires: dict[QuestionnaireType, Questionnaire]) -> None:
    """
    Check the static definitions once at import.

    Raises:
        ConfigurationError: If a count drifted, ids are not 1..N in order, or
            an option set is not a permutation of 0-3
    """
    for questionnaire_type, expected in EXPECTED_QUESTION_COUNTS.items():
        questionnaire = questionnaires.get(questionnaire_type)
        if questionnaire is None:
            raise ConfigurationError(f"No definition for {questionnaire_type.display_name}")
        if questionnaire.question_count != expected:
            raise ConfigurationError(
                f"{questionnaire_type.display_name} must have {expected} questions, "
                f"found {questionnaire.question_count}"
            )
        if questionnaire.question_ids != tuple(range(1, expected + 1)):
            raise ConfigurationError(
                f"{questionnaire_type.display_name} question ids must run 1..{expected}"
            )
        if questionnaire.self_harm_question_id != expected:
            raise ConfigurationError(
                f"{questionnaire_type.display_name} self-harm item must be the last question"
            )
        for question in questionnaire.questions:
            values = [option.value for option in question.options]
            if len(values) != 4 or set(values) != VALID_OPTION_VALUES:
                raise ConfigurationError(
                    f"{questionnaire_type.display_name} question {question.id} "
                    f"must offer values 0-3 exactly once"
                )


_validate_definitions(QUESTIONNAIRES)


def get_questionnaire(questionnaire_type: QuestionnaireType | Any) -> Questionnaire:
    """Return the full questionnaire definition for a type."""
    return QUESTIONNAIRES[get_questionnaire_type(questionnaire_type)]


def get_questions(questionnaire_type: QuestionnaireType | Any) -> tuple[Question, ...]:
    """
    Return the ordered questions of a questionnaire.

    The result is an immutable tuple; repeated calls return equal values.

    Raises:
        InvalidQuestionnaireTypeError: If the type is not EPDS or PHQ-9
    """
    return get_questionnaire(questionnaire_type).questions


def get_question_count(questionnaire_type: QuestionnaireType | Any) -> int:
    return get_questionnaire(questionnaire_type).question_count


def get_max_score(questionnaire_type: QuestionnaireType | Any) -> int:
    return get_questionnaire(questionnaire_type).max_score


def get_self_harm_question_id(questionnaire_type: QuestionnaireType | Any) -> int:
    return get_questionnaire(questionnaire_type).self_harm_question_id


def list_questionnaires() -> list[Questionnaire]:
    return [QUESTIONNAIRES[questionnaire_type] for questionnaire_type in QuestionnaireType]
