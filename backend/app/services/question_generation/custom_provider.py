"""
Custom provider for question generation.

This module implements the QuestionGenerationProvider interface against any
OpenAI-compatible chat-completions endpoint. Some such endpoints only speak
server-sent events even when streaming is disabled, so the body is read as
text and decoded tolerantly.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Tuple

import httpx

from app.exceptions import EmptyResponseError, UpstreamError
from .base import QuestionGenerationProvider
from .parsing import normalize_content, parse_sse_aware_json
from .prompts import SYSTEM_INSTRUCTIONS


logger = logging.getLogger(__name__)


class CustomProvider(QuestionGenerationProvider):
    """
    OpenAI-compatible question generation provider.

    Requires an API key, a model identifier and a base URL; the request is sent
    to ``{base_url}/chat/completions``.
    """

    name = "custom"

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 120.0,
        client: Optional[httpx.Client] = None
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout

        # Create HTTP client with timeout configuration
        self.client = client if client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        self.client.close()

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.strip().rstrip('/')}/chat/completions"

    def required_settings(self) -> List[Tuple[str, str]]:
        return [
            ("Custom API key", self.api_key),
            ("Custom model", self.model),
            ("Custom base URL", self.base_url),
        ]

    def _build_request_body(self, prompt: str, temperature: float) -> Dict[str, Any]:
        return {
            "model": self.model,
            "temperature": temperature,
            "stream": False,
            "messages": [
                {"role": "system", "content": SYSTEM_INSTRUCTIONS},
                {"role": "user", "content": prompt},
            ],
        }

    def generate(self, prompt: str, temperature: float) -> str:
        self.ensure_configured()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        logger.info(
            "Calling custom provider to generate questions",
            extra={
                "provider": self.name,
                "model": self.model,
                "url": self.completions_url,
                "temperature": temperature,
                "prompt_length": len(prompt)
            }
        )
        start_time = time.time()

        response = self.client.post(
            self.completions_url,
            headers=headers,
            json=self._build_request_body(prompt, temperature)
        )
        raw_body = response.text

        logger.debug(
            "Custom provider response received",
            extra={
                "provider": self.name,
                "status_code": response.status_code,
                "response_time_seconds": round(time.time() - start_time, 2),
                "response_length": len(raw_body)
            }
        )

        data = parse_sse_aware_json(raw_body)

        if not response.is_success:
            detail = _error_detail(data, response.reason_phrase)
            logger.error(
                f"Custom provider API error: {response.status_code}",
                extra={"provider": self.name, "status_code": response.status_code, "error_detail": str(detail)[:500]}
            )
            raise UpstreamError(
                f"Custom API error: {detail}",
                details={"status_code": response.status_code}
            )

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            raise UpstreamError("Custom API did not return any choices.")

        content = normalize_content(_choice_content(choices[0]))
        if not content:
            raise EmptyResponseError("Custom API response was empty.")

        return content


def _error_detail(data: Any, reason_phrase: str) -> Any:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message") is not None:
            return error["message"]
        if error is not None:
            return error
    return reason_phrase


def _choice_content(choice: Any) -> Any:
    if not isinstance(choice, dict):
        return ""
    message = choice.get("message")
    if isinstance(message, dict) and message.get("content") is not None:
        return message["content"]
    if choice.get("text") is not None:
        return choice["text"]
    return ""
