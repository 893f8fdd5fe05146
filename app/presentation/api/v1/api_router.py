"""
Main API router for version 1 of the Maternal Wellness API.

Aggregates all endpoint routers for this version.
"""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.assessments import router as assessments_router
from app.presentation.api.v1.endpoints.care_plans import router as care_plans_router
from app.presentation.api.v1.endpoints.goals import router as goals_router
from app.presentation.api.v1.endpoints.moods import router as moods_router
from app.presentation.api.v1.endpoints.questionnaires import router as questionnaires_router

api_v1_router = APIRouter()

api_v1_router.include_router(questionnaires_router, prefix="/questionnaires", tags=["Questionnaires"])
api_v1_router.include_router(assessments_router, prefix="/assessments", tags=["Assessments"])
api_v1_router.include_router(care_plans_router, prefix="/care-plans", tags=["Care Plans"])
api_v1_router.include_router(goals_router, prefix="/goals", tags=["Goals"])
api_v1_router.include_router(moods_router, prefix="/moods", tags=["Moods"])


@api_v1_router.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Check the health of the API."""
    return {"status": "OK"}
