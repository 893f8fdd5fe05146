"""
Care plan endpoints.
"""

from fastapi import APIRouter

from app.presentation.api.dependencies.auth import CurrentUserIdDep
from app.presentation.api.dependencies.services import CarePlanServiceDep
from app.presentation.api.schemas.care_plan import CarePlanPreviewRequest, CarePlanResponse

router = APIRouter()


@router.get("/latest", response_model=CarePlanResponse)
async def get_latest_care_plan(
    user_id: CurrentUserIdDep, service: CarePlanServiceDep
) -> CarePlanResponse:
    """Return the caller's most recently stored care plan."""
    return CarePlanResponse.from_domain(await service.get_latest(user_id))


@router.post("/preview", response_model=CarePlanResponse)
async def preview_care_plan(
    payload: CarePlanPreviewRequest,
    user_id: CurrentUserIdDep,
    service: CarePlanServiceDep,
) -> CarePlanResponse:
    """Generate the plan a score would produce, without storing it."""
    return CarePlanResponse.from_domain(service.preview(payload.questionnaire_type, payload.score))
