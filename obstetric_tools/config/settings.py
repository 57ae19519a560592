"""Application settings loaded from environment variables."""
from functools import lru_cache
from pathlib import Path
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"


class Settings(BaseSettings):
    """Application configuration loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Gemini API (optional case summaries only - evaluators never need it)
    gemini_api_key: str = Field(default="", description="Google Gemini API key")
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini model for case summaries")
    gemini_max_output_tokens: int = Field(default=2048, description="Max output tokens for Gemini summaries")
    gemini_temperature: float = Field(default=0.3, description="Sampling temperature for case summaries")

    # Application
    app_env: str = Field(default="development", description="Application environment")
    log_level: str = Field(default="INFO", description="Logging level")
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Prompt templates
    prompts_dir: str = Field(
        default=str(DEFAULT_PROMPTS_DIR),
        description="Directory containing prompt templates"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
