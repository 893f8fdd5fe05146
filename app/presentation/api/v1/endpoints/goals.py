"""
Goal endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, status

from app.presentation.api.dependencies.auth import CurrentUserIdDep
from app.presentation.api.dependencies.services import GoalServiceDep
from app.presentation.api.schemas.goal import GoalCreateRequest, GoalResponse, GoalUpdateRequest

router = APIRouter()


@router.get("", response_model=list[GoalResponse])
async def list_goals(user_id: CurrentUserIdDep, service: GoalServiceDep) -> list[GoalResponse]:
    """List the caller's goals, oldest first."""
    return [GoalResponse.model_validate(g) for g in await service.list_goals(user_id)]


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    payload: GoalCreateRequest, user_id: CurrentUserIdDep, service: GoalServiceDep
) -> GoalResponse:
    goal = await service.create_goal(user_id, payload.title, payload.description)
    return GoalResponse.model_validate(goal)


@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: UUID,
    payload: GoalUpdateRequest,
    user_id: CurrentUserIdDep,
    service: GoalServiceDep,
) -> GoalResponse:
    """Tick a goal off, or reopen it."""
    goal = await service.set_completed(goal_id, user_id, payload.completed)
    return GoalResponse.model_validate(goal)
