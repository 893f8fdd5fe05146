"""
Score interpretation for the screening questionnaires.

Bands are checked from lowest to highest and the first band whose range
contains the score wins. For each questionnaire the bands are contiguous and
cover exactly 0..max_score.
"""

from dataclasses import dataclass
from typing import Any

from app.domain.entities.assessment import Interpretation
from app.domain.enums.questionnaire_type import QuestionnaireType, get_questionnaire_type
from app.domain.exceptions.assessment_exceptions import ScoreOutOfRangeError
from app.domain.exceptions.base_exceptions import ConfigurationError
from app.domain.services.questionnaire_registry import get_max_score


@dataclass(frozen=True)
class SeverityBand:
    low: int  # inclusive
    high: int  # inclusive
    severity: str
    color_tag: str
    description: str

    def contains(self, score: int) -> bool:
        return self.low <= score <= self.high

    def to_interpretation(self) -> Interpretation:
        return Interpretation(
            severity=self.severity,
            description=self.description,
            color_tag=self.color_tag,
        )


EPDS_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(
        0,
        8,
        "Low Risk",
        "success",
        "Your score suggests a low likelihood of depression. Continue to monitor "
        "your feelings and reach out if symptoms develop.",
    ),
    SeverityBand(
        9,
        12,
        "Moderate Risk",
        "warning",
        "Your score suggests possible depression. Consider discussing your feelings "
        "with a healthcare provider.",
    ),
    SeverityBand(
        13,
        30,
        "High Risk",
        "destructive",
        "Your score suggests probable depression. It's important to speak with a "
        "healthcare provider about your symptoms soon.",
    ),
)

PHQ9_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(
        0,
        4,
        "Minimal",
        "success",
        "Your score suggests minimal depression symptoms. Continue self-monitoring "
        "and self-care.",
    ),
    SeverityBand(
        5,
        9,
        "Mild",
        "success-light",
        "Your score suggests mild depression. Consider watchful waiting, repeating "
        "the PHQ-9 at follow-up, and using self-care resources.",
    ),
    SeverityBand(
        10,
        14,
        "Moderate",
        "warning",
        "Your score suggests moderate depression. Consider counseling, follow-up, "
        "and/or medication based on clinical judgment.",
    ),
    SeverityBand(
        15,
        19,
        "Moderately Severe",
        "warning-dark",
        "Your score suggests moderately severe depression. Active treatment with "
        "medication and/or psychotherapy is recommended.",
    ),
    SeverityBand(
        20,
        27,
        "Severe",
        "destructive",
        "Your score suggests severe depression. Please seek prompt treatment and "
        "referral to a mental health specialist.",
    ),
)

SEVERITY_BANDS: dict[QuestionnaireType, tuple[SeverityBand, ...]] = {
    QuestionnaireType.EPDS: EPDS_BANDS,
    QuestionnaireType.PHQ9: PHQ9_BANDS,
}


def _check_partition(questionnaire_type: QuestionnaireType, bands: tuple[SeverityBand, ...]) -> None:
    expected_low = 0
    for band in bands:
        if band.low != expected_low or band.high < band.low:
            raise ConfigurationError(
                f"{questionnaire_type.display_name} bands must be contiguous from 0"
            )
        expected_low = band.high + 1
    if expected_low - 1 != get_max_score(questionnaire_type):
        raise ConfigurationError(
            f"{questionnaire_type.display_name} bands must end at the maximum score"
        )


for _type, _bands in SEVERITY_BANDS.items():
    _check_partition(_type, _bands)


def check_score_range(questionnaire_type: QuestionnaireType | Any, score: int) -> int:
    """
    Reject scores outside a questionnaire's legal range.

    Raises:
        ScoreOutOfRangeError: If the score is negative or above the maximum
    """
    questionnaire_type = get_questionnaire_type(questionnaire_type)
    max_score = get_max_score(questionnaire_type)
    if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= max_score:
        raise ScoreOutOfRangeError(questionnaire_type.display_name, score, max_score)
    return score


def get_severity_bands(questionnaire_type: QuestionnaireType | Any) -> tuple[SeverityBand, ...]:
    return SEVERITY_BANDS[get_questionnaire_type(questionnaire_type)]


def interpret(questionnaire_type: QuestionnaireType | Any, score: int) -> Interpretation:
    """
    Map a score to its severity band.

    Raises:
        InvalidQuestionnaireTypeError: If the type is unknown
        ScoreOutOfRangeError: If the score is outside the legal range
    """
    questionnaire_type = get_questionnaire_type(questionnaire_type)
    check_score_range(questionnaire_type, score)
    for band in SEVERITY_BANDS[questionnaire_type]:
        if band.contains(score):
            return band.to_interpretation()
    # Unreachable while the partition check above holds
    raise ScoreOutOfRangeError(
        questionnaire_type.display_name, score, get_max_score(questionnaire_type)
    )
