"""
FastAPI dependency providers.
"""

from app.presentation.api.dependencies.auth import CurrentUserIdDep, get_current_user_id
from app.presentation.api.dependencies.services import (
    AssessmentServiceDep,
    CarePlanServiceDep,
    EngineDep,
    GoalServiceDep,
    MoodServiceDep,
    get_assessment_service,
    get_care_plan_service,
    get_goal_service,
    get_mood_service,
)

__all__ = [
    "AssessmentServiceDep",
    "CarePlanServiceDep",
    "CurrentUserIdDep",
    "EngineDep",
    "GoalServiceDep",
    "MoodServiceDep",
    "get_assessment_service",
    "get_care_plan_service",
    "get_current_user_id",
    "get_goal_service",
    "get_mood_service",
]
