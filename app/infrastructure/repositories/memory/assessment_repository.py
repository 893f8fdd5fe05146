"""
In-Memory Assessment Repository Module.

Keeps assessment results in a per-user list. Results are immutable, so they
are stored and returned as-is.
"""

import asyncio
from collections import defaultdict

from app.domain.entities.assessment import AssessmentResult
from app.domain.repositories.assessment_repository import IAssessmentRepository


class InMemoryAssessmentRepository(IAssessmentRepository):
    """In-memory implementation of the assessment result repository."""

    def __init__(self, lock: asyncio.Lock | None = None) -> None:
        self._results: dict[str, list[AssessmentResult]] = defaultdict(list)
        self._lock = lock or asyncio.Lock()

    async def create(self, result: AssessmentResult) -> AssessmentResult:
        async with self._lock:
            self._add(result)
        return result

    async def get_latest_by_user_id(self, user_id: str) -> AssessmentResult | None:
        results = await self.list_by_user_id(user_id)
        return results[0] if results else None

    async def list_by_user_id(self, user_id: str) -> list[AssessmentResult]:
        async with self._lock:
            stored = list(reversed(self._results.get(user_id, [])))
        # Stable sort: results sharing a timestamp stay newest-inserted first
        return sorted(stored, key=lambda r: r.date, reverse=True)

    # Unlocked helpers; callers hold the lock

    def _add(self, result: AssessmentResult) -> None:
        self._results[result.user_id].append(result)

    def _snapshot(self) -> dict[str, list[AssessmentResult]]:
        return {user_id: list(results) for user_id, results in self._results.items()}

    def _restore(self, snapshot: dict[str, list[AssessmentResult]]) -> None:
        self._results = defaultdict(list, snapshot)
