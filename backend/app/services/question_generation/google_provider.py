"""
Google provider for question generation.

This module implements the QuestionGenerationProvider interface using the
Google GenAI SDK (Gemini models).
"""

import logging
import time
from typing import Any, List, Optional, Tuple

from google import genai

from .base import QuestionGenerationProvider


logger = logging.getLogger(__name__)


class GoogleProvider(QuestionGenerationProvider):
    """
    Gemini-based question generation provider.

    The SDK already returns the model output as a string, so no further
    normalization is needed. The client is created lazily on first use so that
    an unconfigured provider never builds one.
    """

    name = "google"

    def __init__(self, api_key: str, model: str, client: Optional[Any] = None):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def required_settings(self) -> List[Tuple[str, str]]:
        return [("Gemini API key", self.api_key)]

    def generate(self, prompt: str, temperature: float) -> str:
        self.ensure_configured()

        logger.info(
            "Calling Google to generate questions",
            extra={"provider": self.name, "model": self.model, "prompt_length": len(prompt)}
        )
        start_time = time.time()

        response = self.client.models.generate_content(model=self.model, contents=prompt)
        text = response.text or ""

        logger.debug(
            "Google response received",
            extra={
                "provider": self.name,
                "response_time_seconds": round(time.time() - start_time, 2),
                "response_length": len(text)
            }
        )
        return text
