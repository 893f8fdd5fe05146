"""
Mood tracking endpoints.
"""

from fastapi import APIRouter, status

from app.presentation.api.dependencies.auth import CurrentUserIdDep
from app.presentation.api.dependencies.services import MoodServiceDep
from app.presentation.api.schemas.mood import MoodCreateRequest, MoodResponse

router = APIRouter()


@router.get("", response_model=list[MoodResponse])
async def list_moods(user_id: CurrentUserIdDep, service: MoodServiceDep) -> list[MoodResponse]:
    """List the caller's mood entries, newest first."""
    return [MoodResponse.model_validate(e) for e in await service.list_moods(user_id)]


@router.post("", response_model=MoodResponse, status_code=status.HTTP_201_CREATED)
async def log_mood(
    payload: MoodCreateRequest, user_id: CurrentUserIdDep, service: MoodServiceDep
) -> MoodResponse:
    entry = await service.log_mood(user_id, payload.mood, payload.notes)
    return MoodResponse.model_validate(entry)


@router.get("/today", response_model=MoodResponse)
async def get_today_mood(user_id: CurrentUserIdDep, service: MoodServiceDep) -> MoodResponse:
    """Return the latest mood logged today (UTC)."""
    return MoodResponse.model_validate(await service.get_today(user_id))
