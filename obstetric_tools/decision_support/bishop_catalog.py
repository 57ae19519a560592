"""Static Bishop score catalog: five components, each with ordered options."""
from typing import Dict, Mapping, Optional, Tuple

from obstetric_tools.models import BishopCriterion, BishopCriterionId, BishopOption
from obstetric_tools.decision_support.exceptions import InvalidScoreError, UnknownCriterionError

BishopScores = Dict[str, Optional[int]]


def _options(*pairs: Tuple[str, int]) -> Tuple[BishopOption, ...]:
    return tuple(BishopOption(label=label, score=score) for label, score in pairs)


BISHOP_CRITERIA: Tuple[BishopCriterion, ...] = (
    BishopCriterion(
        id=BishopCriterionId.DILATION,
        label="Cervical dilation (cm)",
        options=_options(("0", 0), ("1 - 2", 1), ("3 - 4", 2), ("5 - 6", 3)),
    ),
    BishopCriterion(
        id=BishopCriterionId.EFFACEMENT,
        label="Cervical effacement (%)",
        options=_options(("0 - 30", 0), ("40 - 50", 1), ("60 - 70", 2), ("≥ 80", 3)),
    ),
    BishopCriterion(
        id=BishopCriterionId.STATION,
        label="Fetal station",
        options=_options(("-3", 0), ("-2", 1), ("-1 to 0", 2), ("+1 to +2", 3)),
    ),
    BishopCriterion(
        id=BishopCriterionId.CONSISTENCY,
        label="Cervical consistency",
        options=_options(("Firm", 0), ("Medium", 1), ("Soft", 2)),
    ),
    BishopCriterion(
        id=BishopCriterionId.POSITION,
        label="Cervical position",
        options=_options(("Posterior", 0), ("Mid-position", 1), ("Anterior", 2)),
    ),
)

MAX_BISHOP_SCORE = sum(c.max_score for c in BISHOP_CRITERIA)

_BISHOP_BY_ID: Dict[str, BishopCriterion] = {c.id.value: c for c in BISHOP_CRITERIA}


def get_bishop_criterion(criterion_id: str) -> BishopCriterion:
    try:
        return _BISHOP_BY_ID[BishopCriterionId(criterion_id).value]
    except ValueError:
        raise UnknownCriterionError(f"Unknown Bishop criterion: {criterion_id}") from None


def new_bishop_scores() -> BishopScores:
    """Fresh score state with every component unanswered."""
    return {c.id.value: None for c in BISHOP_CRITERIA}


def validate_bishop_scores(scores: Mapping[str, Optional[int]]) -> None:
    """
    Check externally supplied scores against the catalog.

    Raises:
        UnknownCriterionError: A key is not one of the five components.
        InvalidScoreError: A score is not one of the component's option scores.
    """
    for key, score in scores.items():
        criterion = get_bishop_criterion(key)
        if score is None:
            continue
        if isinstance(score, bool) or score not in criterion.allowed_scores:
            raise InvalidScoreError(
                f"Score {score!r} is not valid for {criterion.id.value}; "
                f"expected one of {list(criterion.allowed_scores)}"
            )
