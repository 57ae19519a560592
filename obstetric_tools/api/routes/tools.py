"""Tool selection API routes."""
from fastapi import APIRouter

from obstetric_tools.api.responses import ToolListResponse
from obstetric_tools.decision_support import DISCLAIMER, list_tools

router = APIRouter(prefix="/tools", tags=["Tools"])


@router.get("", response_model=ToolListResponse)
async def get_tools():
    """List the available decision-support tools."""
    return ToolListResponse(tools=list_tools(), disclaimer=DISCLAIMER)
