"""
Questionnaire catalogue endpoints.

Public, read-only access to the screening instruments and their
interpretation bands.
"""

from fastapi import APIRouter, Query

from app.domain.enums.questionnaire_type import get_questionnaire_type
from app.domain.services.questionnaire_registry import get_questionnaire, list_questionnaires
from app.presentation.api.dependencies.services import EngineDep
from app.presentation.api.schemas.questionnaire import (
    InterpretationResponse,
    QuestionnaireResponse,
    QuestionnaireSummary,
)

router = APIRouter()


@router.get("", response_model=list[QuestionnaireSummary])
async def list_questionnaire_types() -> list[QuestionnaireSummary]:
    """List the supported questionnaires."""
    return [QuestionnaireSummary.from_domain(q) for q in list_questionnaires()]


@router.get("/{questionnaire_type}", response_model=QuestionnaireResponse)
async def get_questionnaire_definition(questionnaire_type: str) -> QuestionnaireResponse:
    """Return a questionnaire's questions and options in display order."""
    return QuestionnaireResponse.from_domain(get_questionnaire(questionnaire_type))


@router.get("/{questionnaire_type}/interpretation", response_model=InterpretationResponse)
async def interpret_score(
    questionnaire_type: str,
    engine: EngineDep,
    score: int = Query(..., description="Total score to interpret"),
) -> InterpretationResponse:
    """Map a total score to its severity band."""
    parsed = get_questionnaire_type(questionnaire_type)
    return InterpretationResponse.from_domain(parsed, score, engine.interpret(parsed, score))
