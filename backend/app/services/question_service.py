"""
Question generation service with provider routing.

This module provides a unified interface for question generation using different
providers (Google, custom OpenAI-compatible). The provider is selected per
request and its configuration is checked before any network call is made.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from app.config import Settings
from app.exceptions import ValidationException
from app.schemas.question import GenerateQuestionsRequest
from app.services.question_generation import (
    QuestionGenerationProvider,
    GoogleProvider,
    CustomProvider,
    build_prompt,
    extract_questions,
)


logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "google"


def resolve_provider_name(value: Optional[str]) -> str:
    """Map a requested provider identifier to a supported one ("google" by default)."""
    return "custom" if value == "custom" else DEFAULT_PROVIDER


class QuestionGenerationRouter:
    """
    Select a provider for each request and run the generation pipeline.

    Providers are registered by name; the router itself holds no mutable
    state, so a single instance is shared by concurrent requests.
    """

    def __init__(self, providers: Iterable[QuestionGenerationProvider]):
        self._providers: Dict[str, QuestionGenerationProvider] = {p.name: p for p in providers}
        if DEFAULT_PROVIDER not in self._providers:
            raise ValueError(f"A '{DEFAULT_PROVIDER}' provider must be registered")

    def get_provider(self, name: Optional[str]) -> QuestionGenerationProvider:
        return self._providers.get(resolve_provider_name(name), self._providers[DEFAULT_PROVIDER])

    def close(self) -> None:
        for provider in self._providers.values():
            provider.close()

    def generate_questions(self, request: GenerateQuestionsRequest) -> Any:
        """
        Generate questions for a request.

        Args:
            request: Validated generation request

        Returns:
            Parsed question array exactly as extracted from the model output

        Raises:
            ValidationException: If topic or question count is missing
            ProviderConfigurationException: If the provider is not configured
            AppException: For upstream or parsing failures
        """
        if not request.topic or request.question_count <= 0:
            raise ValidationException(
                "Topic and question count are required.",
                details={"topic": request.topic, "question_count": request.question_count}
            )

        provider = self.get_provider(request.provider)
        provider.ensure_configured()

        logger.info(
            "Generating questions using provider",
            extra={
                "provider": provider.name,
                "topic": request.topic,
                "question_count": request.question_count,
                "temperature": request.temperature
            }
        )

        prompt = build_prompt(request.topic, request.question_count, request.temperature)
        raw_text = provider.generate(prompt, request.temperature)
        questions = extract_questions(raw_text)

        logger.info(
            "Successfully generated questions",
            extra={
                "provider": provider.name,
                "question_count": len(questions) if isinstance(questions, list) else None
            }
        )
        return questions


def build_router(settings: Settings) -> QuestionGenerationRouter:
    """Create the router with both providers configured from ``settings``."""
    return QuestionGenerationRouter([
        GoogleProvider(api_key=settings.gemini_api_key, model=settings.google_model),
        CustomProvider(
            api_key=settings.custom_api_key,
            model=settings.custom_model,
            base_url=settings.custom_base_url,
            timeout=settings.custom_request_timeout
        ),
    ])
