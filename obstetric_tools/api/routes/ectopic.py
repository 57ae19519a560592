"""Ectopic pregnancy tool API routes."""
from fastapi import APIRouter, HTTPException

from obstetric_tools.api.requests import EctopicAnswersRequest
from obstetric_tools.api.responses import (
    EctopicCatalogResponse,
    EctopicEvaluationResponse,
    SummaryResponse,
)
from obstetric_tools.decision_support import (
    ALL_CRITERIA,
    CRITERIA_GROUPS,
    all_answered,
    answered_count,
    evaluate_ectopic,
)
from obstetric_tools.models import CriterionGroup
from obstetric_tools.reasoning.summary_service import get_summary_service
from obstetric_tools.config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/ectopic", tags=["Ectopic pregnancy"])


@router.get("/criteria", response_model=EctopicCatalogResponse)
async def get_ectopic_criteria():
    """Return the three criteria sections in display order."""
    return EctopicCatalogResponse(
        inclusion=list(CRITERIA_GROUPS[CriterionGroup.INCLUSION]),
        absolute_contraindications=list(CRITERIA_GROUPS[CriterionGroup.ABSOLUTE_CONTRAINDICATION]),
        relative_contraindications=list(CRITERIA_GROUPS[CriterionGroup.RELATIVE_CONTRAINDICATION]),
    )


@router.post("/evaluate", response_model=EctopicEvaluationResponse)
async def evaluate_ectopic_case(request: EctopicAnswersRequest):
    """
    Evaluate eligibility for methotrexate treatment.

    Args:
        request: Current answers; ids not in the catalog are ignored

    Returns:
        The recommendation (null when nothing is answered) and progress counts
    """
    answers = request.answers
    return EctopicEvaluationResponse(
        recommendation=evaluate_ectopic(answers),
        answered=answered_count(answers),
        total=len(ALL_CRITERIA),
        all_answered=all_answered(answers),
    )


@router.post("/summary", response_model=SummaryResponse)
async def summarize_ectopic_case(request: EctopicAnswersRequest):
    """
    Ask the AI service for a case summary.

    Only available once every criterion is answered. Service failures are
    returned as the summary text, never as an error status.
    """
    if not all_answered(request.answers):
        raise HTTPException(
            status_code=400,
            detail="All criteria must be answered before requesting a summary"
        )

    logger.info("Case summary requested")
    summary = await get_summary_service().summarize(request.answers)
    return SummaryResponse(summary=summary)
