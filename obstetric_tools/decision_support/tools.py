"""Registry of the available decision-support tools."""
from typing import List
from pydantic import BaseModel, ConfigDict

DISCLAIMER = (
    "These tools are for reference only and do not replace the judgement "
    "of a specialist physician."
)


class ToolDescriptor(BaseModel):
    """Describes one tool for a tool-selection screen."""
    model_config = ConfigDict(frozen=True)

    tool_id: str
    name: str
    description: str


TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        tool_id="ectopic",
        name="Medical treatment of ectopic pregnancy",
        description=(
            "Screen inclusion criteria and contraindications for methotrexate "
            "treatment of ectopic pregnancy."
        ),
    ),
    ToolDescriptor(
        tool_id="bishop",
        name="Bishop score",
        description="Assess cervical readiness before labor induction.",
    ),
]


def list_tools() -> List[ToolDescriptor]:
    return list(TOOLS)
