"""Request models for the decision-support API endpoints."""
from typing import Dict, Optional
from pydantic import BaseModel, Field

from obstetric_tools.models import Answer


class EctopicAnswersRequest(BaseModel):
    """Current answers for the ectopic pregnancy tool."""
    answers: Dict[str, Answer] = Field(
        default_factory=dict,
        description="Answer per criterion id; missing ids are treated as unset"
    )


class BishopScoresRequest(BaseModel):
    """Current Bishop component scores."""
    scores: Dict[str, Optional[int]] = Field(
        default_factory=dict,
        description="Score per component id; null or missing means unanswered"
    )
