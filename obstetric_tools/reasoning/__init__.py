"""Reasoning and LLM integration module."""
from .prompt_loader import PromptLoader, get_prompt_loader
from .summary_service import EctopicSummaryService, TextGenerator, get_summary_service

__all__ = [
    "PromptLoader",
    "get_prompt_loader",
    "EctopicSummaryService",
    "TextGenerator",
    "get_summary_service",
]
