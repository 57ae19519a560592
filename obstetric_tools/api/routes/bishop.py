"""Bishop score tool API routes."""
from fastapi import APIRouter, HTTPException

from obstetric_tools.api.requests import BishopScoresRequest
from obstetric_tools.api.responses import BishopCatalogResponse, BishopEvaluationResponse
from obstetric_tools.decision_support import (
    BISHOP_CRITERIA,
    MAX_BISHOP_SCORE,
    DecisionSupportError,
    bishop_total,
    evaluate_bishop,
    validate_bishop_scores,
)
from obstetric_tools.config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/bishop", tags=["Bishop score"])


@router.get("/criteria", response_model=BishopCatalogResponse)
async def get_bishop_criteria():
    """Return the five Bishop components and their options."""
    return BishopCatalogResponse(criteria=list(BISHOP_CRITERIA), max_total=MAX_BISHOP_SCORE)


@router.post("/evaluate", response_model=BishopEvaluationResponse)
async def evaluate_bishop_score(request: BishopScoresRequest):
    """
    Score cervical readiness before labor induction.

    Returns:
        The recommendation and the total (null until every component is answered)
    """
    try:
        validate_bishop_scores(request.scores)
    except DecisionSupportError as e:
        logger.info("Rejected Bishop scores", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return BishopEvaluationResponse(
        recommendation=evaluate_bishop(request.scores),
        total=bishop_total(request.scores),
        max_total=MAX_BISHOP_SCORE,
    )
