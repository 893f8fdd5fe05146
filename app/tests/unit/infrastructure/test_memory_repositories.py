"""
Tests for the in-memory repositories.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.entities.goal import Goal
from app.domain.entities.mood import MoodEntry
from app.domain.enums.mood_type import MoodType
from app.domain.enums.questionnaire_type import QuestionnaireType
from app.domain.exceptions import EntityNotFoundError
from app.domain.services.assessment_engine import build_assessment_result
from app.domain.services.care_plan_generator import generate_care_plan
from app.infrastructure.repositories.memory import (
    InMemoryAssessmentRepository,
    InMemoryCarePlanRepository,
    InMemoryGoalRepository,
    InMemoryMoodRepository,
)
from app.tests.helpers.answers import EPDS_MODERATE, as_mapping


@pytest.mark.asyncio
async def test_assessments_are_listed_newest_first_per_user():
    repository = InMemoryAssessmentRepository()
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    older = build_assessment_result("epds", as_mapping(EPDS_MODERATE), "a", base)
    newer = build_assessment_result("epds", as_mapping(EPDS_MODERATE), "a", base + timedelta(days=1))
    other = build_assessment_result("epds", as_mapping(EPDS_MODERATE), "b", base)

    for result in (newer, older, other):
        await repository.create(result)

    assert [r.id for r in await repository.list_by_user_id("a")] == [newer.id, older.id]
    assert (await repository.get_latest_by_user_id("a")).id == newer.id
    assert await repository.get_latest_by_user_id("missing") is None


@pytest.mark.asyncio
async def test_care_plans_are_copied_in_and_out():
    repository = InMemoryCarePlanRepository()
    plan = generate_care_plan(QuestionnaireType.EPDS, 5, "a")

    await repository.create(plan)
    plan.goals.clear()
    stored = await repository.get_latest_by_user_id("a")
    stored.mind_and_emotions.clear()

    again = await repository.get_latest_by_user_id("a")
    assert len(again.goals) == 3
    assert len(again.mind_and_emotions) == 2


@pytest.mark.asyncio
async def test_care_plan_create_if_absent_returns_the_first_plan():
    repository = InMemoryCarePlanRepository()
    first = generate_care_plan(QuestionnaireType.EPDS, 5, "a")
    second = generate_care_plan(QuestionnaireType.PHQ9, 22, "a")

    stored, created = await repository.create_if_absent(first)
    kept, created_again = await repository.create_if_absent(second)

    assert created is True and created_again is False
    assert stored.id == kept.id == first.id
    assert (await repository.get_latest_by_user_id("a")).id == first.id


@pytest.mark.asyncio
async def test_goals_from_templates_keep_template_order():
    repository = InMemoryGoalRepository()
    plan = generate_care_plan(QuestionnaireType.EPDS, 0, "a")

    goals = await repository.create_from_templates("a", plan.goals, plan.id)
    await repository.create(Goal(user_id="b", title="Not mine"))

    listed = await repository.list_by_user_id("a")
    assert [g.title for g in listed] == [t.title for t in plan.goals]
    assert [g.id for g in listed] == [g.id for g in goals]
    assert all(g.care_plan_id == plan.id for g in listed)


@pytest.mark.asyncio
async def test_goal_set_completed_checks_ownership():
    repository = InMemoryGoalRepository()
    goal = await repository.create(Goal(user_id="a", title="Walk"))

    updated = await repository.set_completed(goal.id, "a", True)
    assert updated.completed is True
    assert (await repository.list_by_user_id("a"))[0].completed is True

    with pytest.raises(EntityNotFoundError):
        await repository.set_completed(goal.id, "b", False)


@pytest.mark.asyncio
async def test_mood_for_day_uses_utc_calendar_day():
    repository = InMemoryMoodRepository()
    day = datetime(2024, 3, 10, tzinfo=timezone.utc)
    await repository.create(MoodEntry(user_id="a", mood=MoodType.SAD, date=day + timedelta(hours=1)))
    late = await repository.create(
        MoodEntry(user_id="a", mood=MoodType.GREAT, date=day + timedelta(hours=23))
    )
    await repository.create(MoodEntry(user_id="a", mood=MoodType.OKAY, date=day + timedelta(days=1)))

    found = await repository.get_for_day("a", day.date())

    assert found.id == late.id
    assert await repository.get_for_day("a", (day - timedelta(days=1)).date()) is None
    assert len(await repository.list_by_user_id("a")) == 3
