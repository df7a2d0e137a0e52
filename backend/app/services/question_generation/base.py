"""
Base provider interface for question generation.

This module defines the abstract base class that all question generation providers
must implement, ensuring a consistent interface across different providers.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from app.exceptions import ProviderConfigurationException


class QuestionGenerationProvider(ABC):
    """
    Abstract base class for question generation providers.

    All providers (Google, custom OpenAI-compatible, test fakes) implement this
    interface, so the router can select one without knowing how it talks to
    its backend.
    """

    #: Identifier used to select the provider ("google", "custom")
    name: str = ""

    @abstractmethod
    def required_settings(self) -> List[Tuple[str, str]]:
        """
        Describe the settings this provider needs.

        Returns:
            Ordered (label, value) pairs, one per required setting.
        """
        pass

    @abstractmethod
    def generate(self, prompt: str, temperature: float) -> str:
        """
        Send the prompt to the provider and return its output as plain text.

        Args:
            prompt: Instruction text produced by the prompt builder
            temperature: Sampling temperature requested by the caller

        Returns:
            Normalized text content of the provider response

        Raises:
            ProviderConfigurationException: If a required setting is missing
            AppException: For provider-specific failures
        """
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""

    def missing_settings(self) -> List[str]:
        """Labels of required settings that are absent or blank."""
        return [
            label for label, value in self.required_settings()
            if not value or not value.strip()
        ]

    def is_configured(self) -> bool:
        return not self.missing_settings()

    def ensure_configured(self) -> None:
        """
        Fail before any network call if a required setting is missing.

        Raises:
            ProviderConfigurationException: Naming the first missing setting
        """
        missing = self.missing_settings()
        if missing:
            raise ProviderConfigurationException(
                f"{missing[0]} is missing or empty",
                details={"provider": self.name, "missing": missing}
            )
