"""Response models for the decision-support API endpoints."""
from typing import List, Optional
from pydantic import BaseModel

from obstetric_tools.models import BishopCriterion, Criterion, Recommendation
from obstetric_tools.decision_support.tools import ToolDescriptor


class ToolListResponse(BaseModel):
    """Available tools and the usage disclaimer."""
    tools: List[ToolDescriptor]
    disclaimer: str


class EctopicCatalogResponse(BaseModel):
    """The three ectopic criteria sections, in display order."""
    inclusion: List[Criterion]
    absolute_contraindications: List[Criterion]
    relative_contraindications: List[Criterion]


class EctopicEvaluationResponse(BaseModel):
    """Ectopic evaluation; recommendation is null until something is answered."""
    recommendation: Optional[Recommendation] = None
    answered: int
    total: int
    all_answered: bool


class SummaryResponse(BaseModel):
    """AI summary text, or a readable error message."""
    summary: str


class BishopCatalogResponse(BaseModel):
    criteria: List[BishopCriterion]
    max_total: int


class BishopEvaluationResponse(BaseModel):
    """Bishop evaluation; total is null until every component is answered."""
    recommendation: Recommendation
    total: Optional[int] = None
    max_total: int

