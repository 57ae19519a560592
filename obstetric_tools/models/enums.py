"""Enumeration types for the obstetric decision-support tools."""
from enum import Enum


class Answer(str, Enum):
    """Tri-state answer to a yes/no clinical question.

    UNSET is distinct from NO: an unanswered question never counts
    toward completeness.
    """
    UNSET = "unset"
    YES = "yes"
    NO = "no"


class RecommendationLevel(str, Enum):
    """Severity of a recommendation. Callers map it to presentation."""
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


class CriterionGroup(str, Enum):
    """Sections of the ectopic pregnancy criteria catalog."""
    INCLUSION = "inclusion"
    ABSOLUTE_CONTRAINDICATION = "absolute_contraindication"
    RELATIVE_CONTRAINDICATION = "relative_contraindication"


class BishopCriterionId(str, Enum):
    """The five components of the Bishop score."""
    DILATION = "dilation"
    EFFACEMENT = "effacement"
    STATION = "station"
    CONSISTENCY = "consistency"
    POSITION = "position"
