"""AI case summary for the ectopic pregnancy tool.

Optional collaborator: every failure (no API key, network error, remote
error) is returned as a readable message instead of raised, so callers can
always fall back to the rule-based recommendation.
"""
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence

from obstetric_tools.models import Answer, Criterion
from obstetric_tools.decision_support.ectopic_catalog import CRITERIA_GROUPS, answer_for
from obstetric_tools.reasoning.prompt_loader import PromptLoader, get_prompt_loader
from obstetric_tools.config.settings import get_settings
from obstetric_tools.config.logging_config import get_logger

logger = get_logger(__name__)

CASE_SUMMARY_PROMPT = "ectopic/case_summary.txt"

MISSING_KEY_MESSAGE = (
    "Error: the Gemini API key is not configured. "
    "Please set the GEMINI_API_KEY environment variable."
)
EMPTY_SUMMARY_MESSAGE = "Error: the AI service returned an empty summary."

ANSWER_LABELS = {
    Answer.YES: "Yes",
    Answer.NO: "No",
    Answer.UNSET: "Not answered",
}


class TextGenerator(Protocol):
    """Anything that can turn a prompt into {"response": text}."""

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.3,
    ) -> Dict[str, Any]:
        ...


def format_criteria_section(criteria: Sequence[Criterion], state: Mapping[str, Answer]) -> str:
    """One "- question: answer" line per criterion, in catalog order."""
    return "\n".join(
        f"- {c.text}: {ANSWER_LABELS[answer_for(state, c)]}" for c in criteria
    )


class EctopicSummaryService:
    """Builds the case prompt and asks a text generator for a summary."""

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        prompt_loader: Optional[PromptLoader] = None,
    ):
        self._generator = generator
        self._prompt_loader = prompt_loader

    def build_prompt(self, state: Mapping[str, Answer]) -> str:
        loader = self._prompt_loader or get_prompt_loader()
        return loader.load(
            CASE_SUMMARY_PROMPT,
            {
                group.value: format_criteria_section(criteria, state)
                for group, criteria in CRITERIA_GROUPS.items()
            },
        )

    def _resolve_generator(self) -> Optional[TextGenerator]:
        if self._generator is not None:
            return self._generator
        if not get_settings().gemini_api_key:
            return None
        from obstetric_tools.reasoning.gemini_client import GeminiClient
        self._generator = GeminiClient()
        return self._generator

    async def summarize(self, state: Mapping[str, Answer]) -> str:
        """
        Summarize the case for a clinician.

        Args:
            state: Answer per ectopic criterion id (read-only)

        Returns:
            The summary text, or an error message when no summary is available
        """
        try:
            generator = self._resolve_generator()
            if generator is None:
                logger.warning("Case summary requested without GEMINI_API_KEY")
                return MISSING_KEY_MESSAGE

            prompt = self.build_prompt(state)
            result = await generator.generate(
                prompt,
                temperature=get_settings().gemini_temperature,
            )
            summary = result.get("response", "") if isinstance(result, dict) else ""
        except Exception as e:
            logger.error("Case summary failed", error=str(e))
            return (
                "An error occurred while contacting the AI service. "
                f"Please try again. Error: {e}"
            )

        if not summary:
            return EMPTY_SUMMARY_MESSAGE
        logger.info("Case summary generated", length=len(summary))
        return summary


# Global instance
_summary_service: Optional[EctopicSummaryService] = None


def get_summary_service() -> EctopicSummaryService:
    """Get or create the global summary service instance."""
    global _summary_service
    if _summary_service is None:
        _summary_service = EctopicSummaryService()
    return _summary_service
