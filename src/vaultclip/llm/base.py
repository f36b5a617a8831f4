"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Optional


class LLMProvider(ABC):
    """Abstract LLM provider interface."""

    @abstractmethod
    def generate(self, prompt: str, max_output_tokens: Optional[int] = None) -> str:
        """Send a single prompt and return the text of the response.

        Args:
            prompt: Full prompt text (prompt prefix followed by the content).
            max_output_tokens: Override the default max output tokens.

        Raises LLMError when the API call fails. Implementations make exactly
        one request and never retry.
        """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier used for requests."""
