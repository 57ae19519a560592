"""Decision Support Module.

Deterministic rule engines for methotrexate eligibility in ectopic
pregnancy and for the Bishop score before labor induction.
"""

from obstetric_tools.decision_support.exceptions import (
    DecisionSupportError,
    UnknownCriterionError,
    InvalidScoreError,
)
from obstetric_tools.decision_support.ectopic_catalog import (
    INCLUSION_CRITERIA,
    ABSOLUTE_CONTRAINDICATIONS,
    RELATIVE_CONTRAINDICATIONS,
    CRITERIA_GROUPS,
    ALL_CRITERIA,
    get_criterion,
    new_criteria_state,
    answered_count,
    all_answered,
)
from obstetric_tools.decision_support.ectopic_evaluator import evaluate_ectopic
from obstetric_tools.decision_support.bishop_catalog import (
    BISHOP_CRITERIA,
    MAX_BISHOP_SCORE,
    BishopScores,
    get_bishop_criterion,
    new_bishop_scores,
    validate_bishop_scores,
)
from obstetric_tools.decision_support.bishop_evaluator import (
    evaluate_bishop,
    bishop_total,
    bishop_partial_sum,
)
from obstetric_tools.decision_support.tools import list_tools, DISCLAIMER

__all__ = [
    # Exceptions
    "DecisionSupportError",
    "UnknownCriterionError",
    "InvalidScoreError",
    # Ectopic
    "INCLUSION_CRITERIA",
    "ABSOLUTE_CONTRAINDICATIONS",
    "RELATIVE_CONTRAINDICATIONS",
    "CRITERIA_GROUPS",
    "ALL_CRITERIA",
    "get_criterion",
    "new_criteria_state",
    "answered_count",
    "all_answered",
    "evaluate_ectopic",
    # Bishop
    "BISHOP_CRITERIA",
    "MAX_BISHOP_SCORE",
    "BishopScores",
    "get_bishop_criterion",
    "new_bishop_scores",
    "validate_bishop_scores",
    "evaluate_bishop",
    "bishop_total",
    "bishop_partial_sum",
    # Tools
    "list_tools",
    "DISCLAIMER",
]
