"""
Care Plan Generator.

Builds a care plan from a questionnaire type and score: a fixed baseline of
six recommendations and three goals, with severity-specific items appended.
Generation is a pure function of its inputs.
"""

from collections.abc import Callable
from typing import Any

from app.domain.entities.care_plan import (
    CarePlan,
    GoalTemplate,
    RecommendationCategory,
    RecommendationItem,
)
from app.domain.enums.questionnaire_type import QuestionnaireType, get_questionnaire_type
from app.domain.services.interpretation import check_score_range

MIND = RecommendationCategory.MIND
BODY = RecommendationCategory.BODY
SUPPORT = RecommendationCategory.SUPPORT

BASELINE_MIND: tuple[RecommendationItem, ...] = (
    RecommendationItem("Daily mindfulness practice", "5-10 minutes guided meditation", MIND),
    RecommendationItem("Thought journal", "Track mood changes and identify triggers", MIND),
)
BASELINE_BODY: tuple[RecommendationItem, ...] = (
    RecommendationItem("Sleep optimization", "Strategies to improve sleep quality", BODY),
    RecommendationItem("Gentle movement", "Postpartum-safe physical activities", BODY),
)
BASELINE_SUPPORT: tuple[RecommendationItem, ...] = (
    RecommendationItem("Weekly support group", "Virtual meetup with other mothers", SUPPORT),
    RecommendationItem(
        "Communication templates", "Scripts for asking for help from loved ones", SUPPORT
    ),
)
BASELINE_GOALS: tuple[GoalTemplate, ...] = (
    GoalTemplate("Take a 15-minute walk outside", "Fresh air and movement to boost mood"),
    GoalTemplate(
        "Practice deep breathing for 5 minutes", "Helps reduce anxiety and stress hormones"
    ),
    GoalTemplate(
        "Connect with a friend or family member", "Social support is crucial for mental health"
    ),
)

PROFESSIONAL_THERAPY = RecommendationItem(
    "Professional therapy", "Weekly sessions with a mental health professional", SUPPORT
)
STRUCTURED_SELF_CARE = RecommendationItem(
    "Structured self-care plan",
    "A daily schedule of small, achievable self-care activities",
    MIND,
)
MOOD_MONITORING = RecommendationItem(
    "Mood monitoring", "Check in with your mood every day and note any changes", MIND
)
URGENT_SUPPORT = RecommendationItem(
    "Urgent mental health support",
    "Contact a mental health professional or helpline as soon as possible",
    SUPPORT,
)
CRISIS_RESPONSE_PLAN = RecommendationItem(
    "Crisis response plan",
    "Write down your warning signs, coping steps and who to call when things feel overwhelming",
    MIND,
)
REGULAR_ACTIVITY = RecommendationItem(
    "Regular physical activity",
    "Aim for 20-30 minutes of activity on most days",
    BODY,
)
STRUCTURED_ROUTINE = RecommendationItem(
    "Structured daily routine", "Consistent times for waking, meals, rest and activity", MIND
)


def _epds_augmentation(score: int) -> tuple[RecommendationItem, ...]:
    if score > 13:
        return (PROFESSIONAL_THERAPY, STRUCTURED_SELF_CARE)
    if score > 9:
        return (MOOD_MONITORING,)
    return ()


def _phq9_augmentation(score: int) -> tuple[RecommendationItem, ...]:
    if score >= 20:
        return (URGENT_SUPPORT, CRISIS_RESPONSE_PLAN)
    if score >= 15:
        return (PROFESSIONAL_THERAPY, REGULAR_ACTIVITY)
    if score >= 10:
        return (STRUCTURED_ROUTINE,)
    return ()


AUGMENTATION_RULES: dict[QuestionnaireType, Callable[[int], tuple[RecommendationItem, ...]]] = {
    QuestionnaireType.EPDS: _epds_augmentation,
    QuestionnaireType.PHQ9: _phq9_augmentation,
}


def generate_care_plan(
    questionnaire_type: QuestionnaireType | Any, score: int, user_id: str = ""
) -> CarePlan:
    """
    Derive a care plan for a questionnaire score.

    Args:
        questionnaire_type: Questionnaire the score came from
        score: Total score, within the questionnaire's legal range
        user_id: Owner of the plan; empty for previews

    Returns:
        A new CarePlan with the baseline plus severity-specific items

    Raises:
        InvalidQuestionnaireTypeError: If the type is unknown
        ScoreOutOfRangeError: If the score is outside the legal range
    """
    questionnaire_type = get_questionnaire_type(questionnaire_type)
    check_score_range(questionnaire_type, score)

    plan = CarePlan(
        user_id=user_id,
        questionnaire_type=questionnaire_type,
        score=score,
        mind_and_emotions=list(BASELINE_MIND),
        body_and_rest=list(BASELINE_BODY),
        support_and_connection=list(BASELINE_SUPPORT),
        goals=list(BASELINE_GOALS),
    )
    sections = {
        MIND: plan.mind_and_emotions,
        BODY: plan.body_and_rest,
        SUPPORT: plan.support_and_connection,
    }
    for item in AUGMENTATION_RULES[questionnaire_type](score):
        sections[item.category].append(item)
    return plan
