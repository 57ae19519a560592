"""Ectopic pregnancy eligibility for medical (methotrexate) treatment.

Deterministic, priority-ordered rules. The first rule that fires wins:

1. any absolute contraindication answered YES (first in catalog order)
2. any inclusion criterion answered NO (first in catalog order)
3. relative contraindications answered YES (all of them, listed)
4. every criterion answered -> suitable
5. otherwise -> evaluation in progress

Absolute vetoes must preempt inclusion failures, which preempt relative
warnings. Reordering the rules changes the clinical meaning.

Pure function: no I/O, no hidden state. Unknown ids in the state are
ignored because every scan is driven by the catalog.
"""
from typing import List, Mapping, Optional

from obstetric_tools.models import Answer, Criterion, Recommendation, RecommendationLevel
from obstetric_tools.decision_support.ectopic_catalog import (
    ABSOLUTE_CONTRAINDICATIONS,
    INCLUSION_CRITERIA,
    RELATIVE_CONTRAINDICATIONS,
    all_answered,
    answer_for,
    answered_count,
)
from obstetric_tools.config.logging_config import get_logger

logger = get_logger(__name__)

ABSOLUTE_TITLE = "Absolute contraindication: medical treatment NOT recommended"
INCLUSION_TITLE = "Does not meet inclusion criteria"
RELATIVE_TITLE = "Caution: relative contraindication(s) present"
SUITABLE_TITLE = "Suitable for medical treatment"
IN_PROGRESS_TITLE = "Evaluation in progress"

SUITABLE_TEXT = (
    "The patient meets all inclusion criteria and has no contraindications. "
    "She is a good candidate for medical treatment with Methotrexate."
)
IN_PROGRESS_TEXT = (
    "Please answer all questions to reach a final conclusion. "
    "No contraindication has been detected so far."
)


def _first_with_answer(criteria, state: Mapping[str, Answer], answer: Answer) -> Optional[Criterion]:
    for criterion in criteria:
        if answer_for(state, criterion) == answer:
            return criterion
    return None


def _absolute_veto(state: Mapping[str, Answer]) -> Optional[Recommendation]:
    criterion = _first_with_answer(ABSOLUTE_CONTRAINDICATIONS, state, Answer.YES)
    if criterion is None:
        return None
    return Recommendation(
        level=RecommendationLevel.DANGER,
        title=ABSOLUTE_TITLE,
        text=(
            f"The patient has an absolute contraindication ({criterion.text}). "
            "Surgical management should be considered immediately."
        ),
    )


def _inclusion_failure(state: Mapping[str, Answer]) -> Optional[Recommendation]:
    criterion = _first_with_answer(INCLUSION_CRITERIA, state, Answer.NO)
    if criterion is None:
        return None
    return Recommendation(
        level=RecommendationLevel.DANGER,
        title=INCLUSION_TITLE,
        text=(
            f"The patient does not meet the basic inclusion criteria ({criterion.text}). "
            "Medical treatment is not recommended."
        ),
    )


def _relative_warning(state: Mapping[str, Answer]) -> Optional[Recommendation]:
    issues: List[Criterion] = [
        c for c in RELATIVE_CONTRAINDICATIONS if answer_for(state, c) == Answer.YES
    ]
    if not issues:
        return None
    listed = ", ".join(c.text for c in issues)
    return Recommendation(
        level=RecommendationLevel.WARNING,
        title=RELATIVE_TITLE,
        text=(
            "The patient may receive medical treatment, but some factors lower "
            f"the likelihood of success ({listed}). Counsel the patient carefully."
        ),
    )


def _completeness(state: Mapping[str, Answer]) -> Recommendation:
    if all_answered(state):
        return Recommendation(
            level=RecommendationLevel.SUCCESS,
            title=SUITABLE_TITLE,
            text=SUITABLE_TEXT,
        )
    return Recommendation(
        level=RecommendationLevel.INFO,
        title=IN_PROGRESS_TITLE,
        text=IN_PROGRESS_TEXT,
    )


# Clinical priority order: safety vetoes > eligibility > relative risk.
_GUARDS = (
    ("absolute_contraindication", _absolute_veto),
    ("inclusion_failure", _inclusion_failure),
    ("relative_contraindication", _relative_warning),
)


def evaluate_ectopic(state: Mapping[str, Answer]) -> Optional[Recommendation]:
    """
    Evaluate eligibility for methotrexate treatment of ectopic pregnancy.

    Args:
        state: Answer per criterion id. Missing ids count as UNSET.

    Returns:
        The recommendation, or None when no criterion has been answered yet.
    """
    if answered_count(state) == 0:
        return None

    for rule, guard in _GUARDS:
        recommendation = guard(state)
        if recommendation is not None:
            logger.debug("Ectopic evaluation", rule=rule, level=recommendation.level.value)
            return recommendation

    recommendation = _completeness(state)
    logger.debug("Ectopic evaluation", rule="completeness", level=recommendation.level.value)
    return recommendation
