"""
Assessment Service.

Orchestrates a questionnaire submission: the engine validates and scores the
answers, the care plan policy picks the plan, and the result, plan and goals
are stored in one step. Also serves assessment history and live progress
previews.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.application.services.care_plan_service import CarePlanOutcome, CarePlanService
from app.domain.entities.assessment import AssessmentResult
from app.domain.enums.questionnaire_type import get_questionnaire_type
from app.domain.exceptions import EntityNotFoundError
from app.domain.repositories.assessment_repository import IAssessmentRepository
from app.domain.repositories.submission_repository import ISubmissionRepository
from app.domain.services import scoring
from app.domain.services.assessment_engine import AssessmentEngine
from app.domain.services.assessment_session import AssessmentSession, SessionState

logger = logging.getLogger(__name__)


@dataclass
class AssessmentSubmission:
    result: AssessmentResult
    care_plan: CarePlanOutcome


@dataclass
class AssessmentProgress:
    """Snapshot of a partially answered questionnaire. Nothing is stored."""

    session: AssessmentSession

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def result(self) -> AssessmentResult | None:
        return self.session.result


class AssessmentService:
    """Service for submitting and retrieving screening assessments."""

    def __init__(
        self,
        engine: AssessmentEngine,
        assessment_repository: IAssessmentRepository,
        submission_repository: ISubmissionRepository,
        care_plan_service: CarePlanService,
    ):
        """
        Initialize the service with its collaborators.

        Args:
            engine: Pure assessment engine
            assessment_repository: Store for completed assessments
            submission_repository: Stores a result with its plan and goals
            care_plan_service: Generates the plan and holds the policy
        """
        self.engine = engine
        self.assessment_repository = assessment_repository
        self.submission_repository = submission_repository
        self.care_plan_service = care_plan_service

    async def submit(
        self, user_id: str, questionnaire_type: Any, answers: Mapping[Any, Any]
    ) -> AssessmentSubmission:
        """
        Validate, score, store and plan for a complete answer set.

        Validation runs before anything is stored, so a rejected submission
        leaves no trace. The result, the plan and the goal changes are stored
        together: a storage failure leaves none of them behind.

        Raises:
            AssessmentValidationError: If the type or answers are invalid
            RepositoryError: If storage fails
        """
        result = self.engine.submit_assessment(questionnaire_type, answers, user_id)
        plan, created, goals = await self.submission_repository.save_submission(
            result,
            self.care_plan_service.generate_for(result),
            keep_existing_plan=self.care_plan_service.keeps_existing_plan,
        )
        logger.info(
            f"Stored {result.questionnaire_type.display_name} assessment {result.id} "
            f"(severity={result.severity}, self_harm_risk={result.self_harm_risk})"
        )
        if result.self_harm_risk:
            logger.warning(
                f"Self-harm item flagged on {result.questionnaire_type.display_name} "
                f"assessment {result.id}"
            )
        logger.info(
            f"Care plan {plan.id} {'stored' if created else 'kept'} for assessment {result.id} "
            f"(policy={self.care_plan_service.policy.value}, goals={len(goals)})"
        )
        return AssessmentSubmission(
            result=result,
            care_plan=CarePlanOutcome(care_plan=plan, created=created, goals=goals),
        )

    def preview(
        self, user_id: str, questionnaire_type: Any, answers: Mapping[Any, Any]
    ) -> AssessmentProgress:
        """
        Replay a partial answer set through the completion state machine.

        Raises:
            AssessmentValidationError: If the type, an id or a value is invalid
        """
        questionnaire_type = get_questionnaire_type(questionnaire_type)
        accepted = scoring.validate_answers(questionnaire_type, answers, require_complete=False)
        session = AssessmentSession.start(questionnaire_type, user_id)
        for question_id, value in accepted.items():
            session = session.answer(question_id, value)
        return AssessmentProgress(session=session)

    async def list_history(self, user_id: str) -> list[AssessmentResult]:
        return await self.assessment_repository.list_by_user_id(user_id)

    async def get_latest(self, user_id: str) -> AssessmentResult:
        """
        Raises:
            EntityNotFoundError: If the user has no assessments
        """
        result = await self.assessment_repository.get_latest_by_user_id(user_id)
        if result is None:
            raise EntityNotFoundError(message="No assessments found")
        return result
