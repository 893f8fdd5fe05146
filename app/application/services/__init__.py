"""
Application services.

Async orchestration of the assessment engine and the repositories.
"""

from app.application.services.assessment_service import (
    AssessmentProgress,
    AssessmentService,
    AssessmentSubmission,
)
from app.application.services.care_plan_service import (
    CarePlanOutcome,
    CarePlanPolicy,
    CarePlanService,
)
from app.application.services.goal_service import GoalService
from app.application.services.mood_service import MoodService

__all__ = [
    "AssessmentProgress",
    "AssessmentService",
    "AssessmentSubmission",
    "CarePlanOutcome",
    "CarePlanPolicy",
    "CarePlanService",
    "GoalService",
    "MoodService",
]
