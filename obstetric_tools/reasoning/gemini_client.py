"""Gemini client for natural-language case summaries."""
from typing import Dict, Any, Optional

from google import genai
from google.genai import types
from google.api_core.exceptions import (
    GoogleAPIError,
    ServiceUnavailable,
    TooManyRequests,
    DeadlineExceeded,
)
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from obstetric_tools.config.settings import get_settings
from obstetric_tools.config.logging_config import get_logger

logger = get_logger(__name__)


class GeminiError(Exception):
    """Error in Gemini API call."""
    pass


class GeminiClient:
    """
    Gemini client used for optional case summaries.
    Nothing in the rule evaluators depends on it.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        """Initialize the Gemini client."""
        settings = get_settings()
        self.client = genai.Client(api_key=api_key or settings.gemini_api_key)
        self.model_name = model_name or settings.gemini_model
        self.max_output_tokens = settings.gemini_max_output_tokens
        logger.info("Gemini client initialized", model=self.model_name)

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=1, min=1, max=5),
        retry=retry_if_exception_type((
            GoogleAPIError, ServiceUnavailable, TooManyRequests,
            DeadlineExceeded, ConnectionError, TimeoutError,
        )),
        reraise=True
    )
    async def _generate_content(self, prompt: str, config: types.GenerateContentConfig):
        return await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=config,
        )

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.3,
    ) -> Dict[str, Any]:
        """
        Generate text using Gemini.

        Args:
            prompt: The generation prompt
            system_prompt: Optional system instruction
            temperature: Temperature for generation

        Returns:
            {"response": text, "_usage": token counts}

        Raises:
            GeminiError: If generation fails
        """
        logger.info("Generating with Gemini", model=self.model_name)

        try:
            config = types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=self.max_output_tokens,
                system_instruction=system_prompt if system_prompt else None,
            )

            response = await self._generate_content(prompt, config)

            if not response.text:
                raise GeminiError("Empty response from Gemini")

            response_text = response.text
            usage_meta = getattr(response, 'usage_metadata', None)
            input_tokens = getattr(usage_meta, 'prompt_token_count', 0) if usage_meta else 0
            output_tokens = getattr(usage_meta, 'candidates_token_count', 0) if usage_meta else 0
            logger.debug(
                "Gemini response received",
                length=len(response_text),
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )

            usage = {"input_tokens": input_tokens, "output_tokens": output_tokens, "model": self.model_name}
            return {"response": response_text, "_usage": usage}

        except GeminiError:
            raise
        except Exception as e:
            logger.error("Gemini generation failed", error=str(e))
            raise GeminiError(f"Gemini generation failed: {e}") from e
