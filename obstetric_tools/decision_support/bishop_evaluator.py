"""Bishop score evaluation before labor induction. Pure logic, no I/O."""
from typing import Mapping, Optional

from obstetric_tools.models import Recommendation, RecommendationLevel
from obstetric_tools.decision_support.bishop_catalog import BISHOP_CRITERIA
from obstetric_tools.config.logging_config import get_logger

logger = get_logger(__name__)

# Inclusive on the favorable side: a total of exactly 5 is favorable.
FAVORABLE_THRESHOLD = 5

INSUFFICIENT_TITLE = "Insufficient information"
UNFAVORABLE_TITLE = "Unfavorable cervix (Bishop < 5)"
FAVORABLE_TITLE = "Favorable cervix (Bishop ≥ 5)"

INSUFFICIENT_TEXT = "Please select a value for every criterion to compute the Bishop score and see the result."
UNFAVORABLE_TEXT = (
    "Cervical ripening is needed before labor induction.\n"
    "Suggested methods: prostaglandins, Foley catheter, cervical ripening balloon (CRB), "
    "membrane sweeping, laminaria."
)
FAVORABLE_TEXT = (
    "High likelihood of successful labor induction.\n"
    "Suggested methods: oxytocin, or oxytocin combined with amniotomy."
)


def bishop_partial_sum(scores: Mapping[str, Optional[int]]) -> int:
    """Sum of the five components, counting unanswered ones as 0."""
    return sum(scores.get(c.id.value) or 0 for c in BISHOP_CRITERIA)


def bishop_all_answered(scores: Mapping[str, Optional[int]]) -> bool:
    return all(scores.get(c.id.value) is not None for c in BISHOP_CRITERIA)


def bishop_total(scores: Mapping[str, Optional[int]]) -> Optional[int]:
    """Total for display; None until every component is answered."""
    if not bishop_all_answered(scores):
        return None
    return bishop_partial_sum(scores)


def evaluate_bishop(scores: Mapping[str, Optional[int]]) -> Recommendation:
    """
    Evaluate cervical readiness from the Bishop score.

    Args:
        scores: Score per component id, None when unanswered.

    Returns:
        INFO until all five are answered, then WARNING below 5 or SUCCESS at 5 and above.
    """
    if not bishop_all_answered(scores):
        return Recommendation(
            level=RecommendationLevel.INFO,
            title=INSUFFICIENT_TITLE,
            text=INSUFFICIENT_TEXT,
        )

    total = bishop_partial_sum(scores)
    logger.debug("Bishop evaluation", total=total)

    if total < FAVORABLE_THRESHOLD:
        return Recommendation(
            level=RecommendationLevel.WARNING,
            title=UNFAVORABLE_TITLE,
            text=UNFAVORABLE_TEXT,
        )
    return Recommendation(
        level=RecommendationLevel.SUCCESS,
        title=FAVORABLE_TITLE,
        text=FAVORABLE_TEXT,
    )
