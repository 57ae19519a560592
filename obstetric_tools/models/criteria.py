"""Catalog entry models for the decision-support tools."""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .enums import BishopCriterionId


class Criterion(BaseModel):
    """A yes/no clinical question in a criteria catalog."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier, unique within its catalog")
    text: str = Field(..., description="Human-readable question")
    explanation: Optional[str] = Field(default=None, description="Optional clinical context")


class BishopOption(BaseModel):
    """One selectable finding for a Bishop criterion and the points it scores."""
    model_config = ConfigDict(frozen=True)

    label: str
    score: int = Field(..., ge=0)


class BishopCriterion(BaseModel):
    """A Bishop score component with its ordered options."""
    model_config = ConfigDict(frozen=True)

    id: BishopCriterionId
    label: str
    options: Tuple[BishopOption, ...]

    @property
    def max_score(self) -> int:
        return max(option.score for option in self.options)

    @property
    def allowed_scores(self) -> Tuple[int, ...]:
        return tuple(option.score for option in self.options)
