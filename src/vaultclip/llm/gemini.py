"""Google Gemini LLM provider over the Generative Language REST API."""

from typing import Any, Optional

import httpx

from ..exceptions import LLMError
from .base import LLMProvider

BASE_URL = "https://generativelanguage.googleapis.com"
_DEFAULT_MAX_OUTPUT = 2_048


class GeminiProvider(LLMProvider):
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        base_url: str = BASE_URL,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("Missing Google API key")
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    def generate(self, prompt: str, max_output_tokens: Optional[int] = None) -> str:
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": max_output_tokens or _DEFAULT_MAX_OUTPUT,
            },
        }
        try:
            data = self._post(payload)
        except httpx.HTTPStatusError as e:
            raise LLMError(
                f"Gemini API error: HTTP {e.response.status_code} {e.response.text[:200]}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise LLMError(f"Gemini API error: {e}") from e
        try:
            return _extract_text(data)
        except AttributeError as e:
            raise LLMError(f"Unexpected Gemini response: {e}") from e

    def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._base_url}/v1beta/models/{self._model}:generateContent"
        params = {"key": self._api_key}
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            resp = client.post(url, params=params, json=payload)
            resp.raise_for_status()
            return resp.json()


def _extract_text(data: dict[str, Any]) -> str:
    """Join the text parts of the first candidate, skipping thought parts."""
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    return "".join(
        part.get("text", "") for part in parts if not part.get("thought")
    )
