"""
SQLAlchemy repository implementations.
"""

from app.infrastructure.persistence.sqlalchemy.repositories.assessment_repository import (
    SQLAlchemyAssessmentRepository,
)
from app.infrastructure.persistence.sqlalchemy.repositories.care_plan_repository import (
    SQLAlchemyCarePlanRepository,
)
from app.infrastructure.persistence.sqlalchemy.repositories.goal_repository import (
    SQLAlchemyGoalRepository,
)
from app.infrastructure.persistence.sqlalchemy.repositories.mood_repository import (
    SQLAlchemyMoodRepository,
)
from app.infrastructure.persistence.sqlalchemy.repositories.submission_repository import (
    SQLAlchemySubmissionRepository,
)

__all__ = [
    "SQLAlchemyAssessmentRepository",
    "SQLAlchemyCarePlanRepository",
    "SQLAlchemyGoalRepository",
    "SQLAlchemyMoodRepository",
    "SQLAlchemySubmissionRepository",
]
