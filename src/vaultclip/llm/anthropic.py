"""Claude/Anthropic LLM provider."""

from typing import Optional

import anthropic

from ..exceptions import LLMError
from .base import LLMProvider

_DEFAULT_MAX_OUTPUT = 2_048


class AnthropicProvider(LLMProvider):
    def __init__(self, api_key: str, model: str = "claude-sonnet-4-20250514"):
        self._client = anthropic.Anthropic(api_key=api_key)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def generate(self, prompt: str, max_output_tokens: Optional[int] = None) -> str:
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=max_output_tokens or _DEFAULT_MAX_OUTPUT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            raise LLMError(f"Anthropic API error: {e}") from e
        return "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
