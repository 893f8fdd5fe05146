"""
In-Memory Care Plan Repository Module.
"""

import asyncio
import copy
from collections import defaultdict

from app.domain.entities.care_plan import CarePlan
from app.domain.repositories.care_plan_repository import ICarePlanRepository


class InMemoryCarePlanRepository(ICarePlanRepository):
    """
    In-memory implementation of the care plan repository.

    Plans are deep-copied on the way in and out so callers cannot mutate
    stored state.
    """

    def __init__(self, lock: asyncio.Lock | None = None) -> None:
        self._plans: dict[str, list[CarePlan]] = defaultdict(list)
        self._lock = lock or asyncio.Lock()

    async def create(self, care_plan: CarePlan) -> CarePlan:
        async with self._lock:
            return self._add(care_plan)

    async def create_if_absent(self, care_plan: CarePlan) -> tuple[CarePlan, bool]:
        async with self._lock:
            existing = self._first(care_plan.user_id)
            if existing is not None:
                return existing, False
            return self._add(care_plan), True

    async def get_latest_by_user_id(self, user_id: str) -> CarePlan | None:
        async with self._lock:
            plans = self._plans.get(user_id)
            return copy.deepcopy(plans[-1]) if plans else None

    # Unlocked helpers; callers hold the lock

    def _add(self, care_plan: CarePlan) -> CarePlan:
        self._plans[care_plan.user_id].append(copy.deepcopy(care_plan))
        return copy.deepcopy(care_plan)

    def _first(self, user_id: str) -> CarePlan | None:
        plans = self._plans.get(user_id)
        return copy.deepcopy(plans[0]) if plans else None

    def _snapshot(self) -> dict[str, list[CarePlan]]:
        # Stored plans are never mutated in place, so sharing them is safe
        return {user_id: list(plans) for user_id, plans in self._plans.items()}

    def _restore(self, snapshot: dict[str, list[CarePlan]]) -> None:
        self._plans = defaultdict(list, snapshot)
