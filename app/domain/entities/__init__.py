"""
Domain entities package for the Maternal Wellness backend.

This package contains business domain entities representing core objects
in the system with their properties and behaviors.
"""

from app.domain.entities.assessment import (
    AnswerSet,
    AssessmentResult,
    CrisisAdvisory,
    Helpline,
    Interpretation,
)
from app.domain.entities.care_plan import (
    CarePlan,
    GoalTemplate,
    RecommendationCategory,
    RecommendationItem,
)
from app.domain.entities.goal import Goal
from app.domain.entities.mood import MoodEntry
from app.domain.entities.questionnaire import Option, Question, Questionnaire

__all__ = [
    "AnswerSet",
    "AssessmentResult",
    "CarePlan",
    "CrisisAdvisory",
    "Goal",
    "GoalTemplate",
    "Helpline",
    "Interpretation",
    "MoodEntry",
    "Option",
    "Question",
    "Questionnaire",
    "RecommendationCategory",
    "RecommendationItem",
]
