"""
Domain Repository Interfaces.

This package contains repository interfaces defined at the domain layer.
These repositories define the contract for accessing domain entities without
specifying implementation details. Infrastructure provides the in-memory and
SQLAlchemy implementations.
"""

from app.domain.repositories.assessment_repository import IAssessmentRepository
from app.domain.repositories.care_plan_repository import ICarePlanRepository
from app.domain.repositories.goal_repository import IGoalRepository
from app.domain.repositories.mood_repository import IMoodRepository
from app.domain.repositories.submission_repository import ISubmissionRepository

__all__ = [
    "IAssessmentRepository",
    "ICarePlanRepository",
    "IGoalRepository",
    "IMoodRepository",
    "ISubmissionRepository",
]
