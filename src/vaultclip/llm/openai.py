"""OpenAI LLM provider."""

from typing import Optional

import openai

from ..exceptions import LLMError
from .base import LLMProvider

_DEFAULT_MAX_OUTPUT = 2_048


class OpenAIProvider(LLMProvider):
    def __init__(self, api_key: str, model: str = "gpt-4o"):
        self._client = openai.OpenAI(api_key=api_key)
        self._model = model
        # Newer models (o1, o3, gpt-4.1, gpt-5, etc.) require
        # max_completion_tokens instead of max_tokens.
        self._use_max_completion_tokens = not self._is_legacy_model(model)

    @property
    def model(self) -> str:
        return self._model

    def generate(self, prompt: str, max_output_tokens: Optional[int] = None) -> str:
        token_param = (
            "max_completion_tokens"
            if self._use_max_completion_tokens
            else "max_tokens"
        )
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                **{token_param: max_output_tokens or _DEFAULT_MAX_OUTPUT},
            )
        except openai.APIError as e:
            raise LLMError(f"OpenAI API error: {e}") from e
        return response.choices[0].message.content or ""

    @staticmethod
    def _is_legacy_model(model: str) -> bool:
        """Check if the model uses the legacy max_tokens parameter."""
        legacy_prefixes = ("gpt-3.5", "gpt-4o", "gpt-4-turbo", "gpt-4-")
        return any(model.startswith(p) for p in legacy_prefixes)
