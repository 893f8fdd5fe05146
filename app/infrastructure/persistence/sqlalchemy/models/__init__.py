"""SQLAlchemy models package.

This package contains all SQLAlchemy ORM models used by the application.
Importing it registers every table on `Base.metadata`.
"""

from app.infrastructure.persistence.sqlalchemy.models.assessment import AssessmentModel
from app.infrastructure.persistence.sqlalchemy.models.base import Base, UserOwnedMixin
from app.infrastructure.persistence.sqlalchemy.models.care_plan import CarePlanModel
from app.infrastructure.persistence.sqlalchemy.models.goal import GoalModel
from app.infrastructure.persistence.sqlalchemy.models.mood import MoodModel

__all__ = [
    "AssessmentModel",
    "Base",
    "CarePlanModel",
    "GoalModel",
    "MoodModel",
    "UserOwnedMixin",
]
