"""
Service Dependencies for the Presentation Layer.

Services are cheap to build, so each request gets fresh instances wired to
the application-wide repositories opened at startup.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.application.services.assessment_service import AssessmentService
from app.application.services.care_plan_service import CarePlanService
from app.application.services.goal_service import GoalService
from app.application.services.mood_service import MoodService
from app.core.config.settings import Settings
from app.domain.services.assessment_engine import AssessmentEngine
from app.infrastructure.repositories.factory import RepositoryBundle

_engine = AssessmentEngine()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repositories(request: Request) -> RepositoryBundle:
    """
    Return the repositories opened by the application lifespan.

    Raises:
        RuntimeError: If the lifespan has not run
    """
    repositories = getattr(request.app.state, "repositories", None)
    if repositories is None:
        raise RuntimeError("Storage not initialized. Repositories missing from app state.")
    return repositories


def get_assessment_engine() -> AssessmentEngine:
    return _engine


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RepositoriesDep = Annotated[RepositoryBundle, Depends(get_repositories)]
EngineDep = Annotated[AssessmentEngine, Depends(get_assessment_engine)]


def get_care_plan_service(
    engine: EngineDep, repositories: RepositoriesDep, settings: SettingsDep
) -> CarePlanService:
    return CarePlanService(
        engine=engine,
        care_plan_repository=repositories.care_plans,
        policy=settings.CARE_PLAN_POLICY,
    )


CarePlanServiceDep = Annotated[CarePlanService, Depends(get_care_plan_service)]


def get_assessment_service(
    engine: EngineDep, repositories: RepositoriesDep, care_plan_service: CarePlanServiceDep
) -> AssessmentService:
    return AssessmentService(
        engine=engine,
        assessment_repository=repositories.assessments,
        submission_repository=repositories.submissions,
        care_plan_service=care_plan_service,
    )


def get_goal_service(repositories: RepositoriesDep) -> GoalService:
    return GoalService(repositories.goals)


def get_mood_service(repositories: RepositoriesDep) -> MoodService:
    return MoodService(repositories.moods)


AssessmentServiceDep = Annotated[AssessmentService, Depends(get_assessment_service)]
GoalServiceDep = Annotated[GoalService, Depends(get_goal_service)]
MoodServiceDep = Annotated[MoodService, Depends(get_mood_service)]
