"""
Tests for care plan generation.
"""

import pytest

from app.domain.entities.care_plan import RecommendationCategory
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.exceptions import ScoreOutOfRangeError
from app.domain.services.care_plan_generator import generate_care_plan

BASELINE_GOAL_TITLES = [
    "Take a 15-minute walk outside",
    "Practice deep breathing for 5 minutes",
    "Connect with a friend or family member",
]


def test_low_score_gets_the_baseline_only():
    plan = generate_care_plan(QuestionnaireType.EPDS, 0)

    assert [item.title for item in plan.mind_and_emotions] == [
        "Daily mindfulness practice",
        "Thought journal",
    ]
    assert [item.title for item in plan.body_and_rest] == [
        "Sleep optimization",
        "Gentle movement",
    ]
    assert [item.title for item in plan.support_and_connection] == [
        "Weekly support group",
        "Communication templates",
    ]
    assert [goal.title for goal in plan.goals] == BASELINE_GOAL_TITLES
    assert plan.user_id == ""


@pytest.mark.parametrize(
    "score, extra_titles",
    [
        (9, []),
        (10, ["Mood monitoring"]),
        # 13 is already High Risk but only reaches the mood monitoring tier
        (13, ["Mood monitoring"]),
        (14, ["Professional therapy", "Structured self-care plan"]),
        (30, ["Professional therapy", "Structured self-care plan"]),
    ],
)
def test_epds_augmentation_tiers(score, extra_titles):
    plan = generate_care_plan(QuestionnaireType.EPDS, score)

    titles = [item.title for item in plan.recommendations]
    assert len(titles) == 6 + len(extra_titles)
    for title in extra_titles:
        assert plan.has_recommendation(title)


@pytest.mark.parametrize(
    "score, extra_titles",
    [
        (9, []),
        (10, ["Structured daily routine"]),
        (15, ["Professional therapy", "Regular physical activity"]),
        (20, ["Urgent mental health support", "Crisis response plan"]),
    ],
)
def test_phq9_augmentation_tiers(score, extra_titles):
    plan = generate_care_plan(QuestionnaireType.PHQ9, score)

    assert len(plan.recommendations) == 6 + len(extra_titles)
    for title in extra_titles:
        assert plan.has_recommendation(title)


def test_phq9_severe_plan():
    plan = generate_care_plan(QuestionnaireType.PHQ9, 22, user_id="user-1")

    assert len(plan.recommendations) == 8
    assert len(plan.goals) == 3
    assert plan.user_id == "user-1"
    assert plan.support_and_connection[-1].title == "Urgent mental health support"
    assert plan.mind_and_emotions[-1].title == "Crisis response plan"


def test_augmented_items_land_in_their_category_section():
    plan = generate_care_plan(QuestionnaireType.PHQ9, 16)

    assert plan.body_and_rest[-1].title == "Regular physical activity"
    assert all(item.category is RecommendationCategory.BODY for item in plan.body_and_rest)
    assert all(
        item.category is RecommendationCategory.SUPPORT for item in plan.support_and_connection
    )


def test_generation_is_deterministic_and_independent():
    first = generate_care_plan(QuestionnaireType.EPDS, 20)
    second = generate_care_plan(QuestionnaireType.EPDS, 20)

    assert first.recommendations == second.recommendations
    assert first.goals == second.goals
    assert first.id != second.id

    first.mind_and_emotions.clear()
    assert len(generate_care_plan(QuestionnaireType.EPDS, 20).mind_and_emotions) == 3


def test_out_of_range_score_is_rejected():
    with pytest.raises(ScoreOutOfRangeError):
        generate_care_plan(QuestionnaireType.PHQ9, 28)
