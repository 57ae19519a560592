"""Recommendation model shared by both evaluators."""
from pydantic import BaseModel, ConfigDict, Field

from .enums import RecommendationLevel


class Recommendation(BaseModel):
    """Outcome of an evaluation. Recomputed on every state change."""
    model_config = ConfigDict(frozen=True)

    level: RecommendationLevel = Field(..., description="Severity of the recommendation")
    title: str = Field(..., description="Short headline")
    text: str = Field(..., description="Explanatory text")
