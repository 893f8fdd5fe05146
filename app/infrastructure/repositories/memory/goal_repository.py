"""
In-Memory Goal Repository Module.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import replace
from uuid import UUID

from app.domain.entities.care_plan import GoalTemplate
from app.domain.entities.goal import Goal
from app.domain.exceptions.persistence_exceptions import EntityNotFoundError
from app.domain.repositories.goal_repository import IGoalRepository


class InMemoryGoalRepository(IGoalRepository):
    """In-memory implementation of the goal repository, keyed by goal id."""

    def __init__(self, lock: asyncio.Lock | None = None) -> None:
        self._goals: dict[UUID, Goal] = {}
        self._lock = lock or asyncio.Lock()

    async def create(self, goal: Goal) -> Goal:
        async with self._lock:
            self._goals[goal.id] = replace(goal)
        return replace(goal)

    async def create_from_templates(
        self, user_id: str, templates: Sequence[GoalTemplate], care_plan_id: UUID | None
    ) -> list[Goal]:
        async with self._lock:
            return self._add_from_templates(user_id, templates, care_plan_id)

    async def list_by_user_id(self, user_id: str) -> list[Goal]:
        async with self._lock:
            # dict preserves insertion order, which doubles as creation order
            return [replace(g) for g in self._goals.values() if g.user_id == user_id]

    async def set_completed(self, goal_id: UUID, user_id: str, completed: bool) -> Goal:
        async with self._lock:
            goal = self._goals.get(goal_id)
            if goal is None or goal.user_id != user_id:
                raise EntityNotFoundError("Goal", str(goal_id))
            goal.completed = completed
            return replace(goal)

    # Unlocked helpers; callers hold the lock

    def _add_from_templates(
        self, user_id: str, templates: Sequence[GoalTemplate], care_plan_id: UUID | None
    ) -> list[Goal]:
        goals = [Goal.from_template(template, user_id, care_plan_id) for template in templates]
        for goal in goals:
            self._goals[goal.id] = replace(goal)
        return goals

    def _remove_open_template_goals(self, user_id: str) -> int:
        stale = [
            goal_id
            for goal_id, goal in self._goals.items()
            if goal.user_id == user_id and goal.is_open_template_goal
        ]
        for goal_id in stale:
            del self._goals[goal_id]
        return len(stale)

    def _snapshot(self) -> dict[UUID, Goal]:
        return {goal_id: replace(goal) for goal_id, goal in self._goals.items()}

    def _restore(self, snapshot: dict[UUID, Goal]) -> None:
        self._goals = snapshot
