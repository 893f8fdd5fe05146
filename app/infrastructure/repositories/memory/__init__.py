"""
In-Memory Repository Implementations.

This package contains in-memory implementations of repository interfaces,
used for testing, local development, and deployments where persistent
storage is not required.
"""

from app.infrastructure.repositories.memory.assessment_repository import (
    InMemoryAssessmentRepository,
)
from app.infrastructure.repositories.memory.care_plan_repository import InMemoryCarePlanRepository
from app.infrastructure.repositories.memory.goal_repository import InMemoryGoalRepository
from app.infrastructure.repositories.memory.mood_repository import InMemoryMoodRepository
from app.infrastructure.repositories.memory.submission_repository import (
    InMemorySubmissionRepository,
)

__all__ = [
    "InMemoryAssessmentRepository",
    "InMemoryCarePlanRepository",
    "InMemoryGoalRepository",
    "InMemoryMoodRepository",
    "InMemorySubmissionRepository",
]
