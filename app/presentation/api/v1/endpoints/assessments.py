"""
Assessment endpoints.

Submitting a complete answer set stores the result and applies the care
plan policy in one request. A self-harm flag is always returned together
with its crisis advisory; clients must show it.
"""

import logging

from fastapi import APIRouter, status

from app.presentation.api.dependencies.auth import CurrentUserIdDep
from app.presentation.api.dependencies.services import AssessmentServiceDep
from app.presentation.api.schemas.assessment import (
    AssessmentPreviewResponse,
    AssessmentRequest,
    AssessmentResponse,
    AssessmentSubmissionResponse,
)
from app.presentation.api.schemas.care_plan import CarePlanResponse
from app.presentation.api.schemas.goal import GoalResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AssessmentSubmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_assessment(
    payload: AssessmentRequest,
    user_id: CurrentUserIdDep,
    service: AssessmentServiceDep,
) -> AssessmentSubmissionResponse:
    """
    Submit a completed questionnaire.

    Returns:
        The stored result, the care plan and any goals created from it
    """
    submission = await service.submit(user_id, payload.questionnaire_type, payload.answer_mapping())
    outcome = submission.care_plan
    return AssessmentSubmissionResponse(
        assessment=AssessmentResponse.from_domain(submission.result),
        care_plan=CarePlanResponse.from_domain(outcome.care_plan),
        care_plan_created=outcome.created,
        goals=[GoalResponse.model_validate(goal) for goal in outcome.goals],
    )


@router.post("/preview", response_model=AssessmentPreviewResponse)
async def preview_assessment(
    payload: AssessmentRequest,
    user_id: CurrentUserIdDep,
    service: AssessmentServiceDep,
) -> AssessmentPreviewResponse:
    """Score a possibly partial answer set without storing anything."""
    progress = service.preview(user_id, payload.questionnaire_type, payload.answer_mapping())
    return AssessmentPreviewResponse.from_progress(progress)


@router.get("", response_model=list[AssessmentResponse])
async def list_assessments(
    user_id: CurrentUserIdDep, service: AssessmentServiceDep
) -> list[AssessmentResponse]:
    """List the caller's assessments, newest first."""
    results = await service.list_history(user_id)
    return [AssessmentResponse.from_domain(r) for r in results]


@router.get("/latest", response_model=AssessmentResponse)
async def get_latest_assessment(
    user_id: CurrentUserIdDep, service: AssessmentServiceDep
) -> AssessmentResponse:
    return AssessmentResponse.from_domain(await service.get_latest(user_id))
