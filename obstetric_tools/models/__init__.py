"""Data models for the obstetric decision-support tools."""
from .enums import (
    Answer,
    RecommendationLevel,
    CriterionGroup,
    BishopCriterionId,
)
from .criteria import Criterion, BishopOption, BishopCriterion
from .recommendation import Recommendation

__all__ = [
    "Answer",
    "RecommendationLevel",
    "CriterionGroup",
    "BishopCriterionId",
    "Criterion",
    "BishopOption",
    "BishopCriterion",
    "Recommendation",
]
