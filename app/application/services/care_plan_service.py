"""
Care Plan Service.

Owns the care plan policy: generates the plan for a completed assessment and
tells the submission store whether an existing plan is kept. Also serves
care plan lookups and previews.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from app.domain.entities.assessment import AssessmentResult
from app.domain.entities.care_plan import CarePlan
from app.domain.entities.goal import Goal
from app.domain.exceptions import EntityNotFoundError
from app.domain.repositories.care_plan_repository import ICarePlanRepository
from app.domain.services.assessment_engine import AssessmentEngine


class CarePlanPolicy(str, Enum):
    """How stored care plans respond to a retake."""

    REGENERATE = "regenerate"  # every assessment stores a new plan
    CREATE_ONCE = "create_once"  # the first plan is kept for good


@dataclass
class CarePlanOutcome:
    care_plan: CarePlan
    created: bool
    goals: list[Goal] = field(default_factory=list)


class CarePlanService:
    """Service for generating and retrieving care plans."""

    def __init__(
        self,
        engine: AssessmentEngine,
        care_plan_repository: ICarePlanRepository,
        policy: CarePlanPolicy | str = CarePlanPolicy.REGENERATE,
    ):
        self.engine = engine
        self.care_plan_repository = care_plan_repository
        self.policy = CarePlanPolicy(policy)

    @property
    def keeps_existing_plan(self) -> bool:
        return self.policy is CarePlanPolicy.CREATE_ONCE

    def generate_for(self, result: AssessmentResult) -> CarePlan:
        """Generate the plan a completed assessment would store."""
        return self.engine.generate_care_plan(
            result.questionnaire_type, result.score, result.user_id
        )

    async def get_latest(self, user_id: str) -> CarePlan:
        """
        Raises:
            EntityNotFoundError: If the user has no stored care plan
        """
        plan = await self.care_plan_repository.get_latest_by_user_id(user_id)
        if plan is None:
            raise EntityNotFoundError(message="No care plan found. Complete an assessment first.")
        return plan

    def preview(self, questionnaire_type: Any, score: int) -> CarePlan:
        """Generate a plan for a score without storing anything."""
        return self.engine.generate_care_plan(questionnaire_type, score)
