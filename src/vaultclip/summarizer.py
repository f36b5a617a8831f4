"""AI summary generation and response cleanup."""

import re
from typing import Optional

from .llm.base import LLMProvider
from .models import SummaryResult

FAILED_MESSAGE = "⚠️ Failed to get summary."
DISABLED_MESSAGE = "AI Summary not enabled."
NO_CONTENT_MESSAGE = "No content to summarize."

_PREAMBLE = re.compile(r"^Here['’]s[^\n]*\n", re.IGNORECASE)
_BULLET = re.compile(r"^[ \t]*\*[ \t]+", re.MULTILINE)


def normalize_summary(text: str) -> str:
    """Clean raw model output for the AI Summary section.

    Drops a conversational "Here's ..." first line, rewrites "*" bullets
    as "- " and trims the result.
    """
    if not text:
        return ""
    text = _PREAMBLE.sub("", text, count=1)
    text = _BULLET.sub("- ", text)
    return text.strip()


def summarize(llm: LLMProvider, prompt_prefix: str, snippet: str) -> SummaryResult:
    """Run one summarization call; a failed call becomes a failure result."""
    try:
        text = normalize_summary(llm.generate(prompt_prefix + snippet))
    except Exception as e:
        return SummaryResult(message=FAILED_MESSAGE, error=str(e) or type(e).__name__)
    return SummaryResult(message=text, text=text)


def resolve_summary(
    llm: Optional[LLMProvider],
    prompt_prefix: str,
    snippet: str,
    extract_only: bool,
) -> SummaryResult:
    """Pick the AI Summary content.

    Extraction-only mode wins, then an empty snippet; only otherwise is the
    model called.
    """
    if extract_only:
        return SummaryResult(message=DISABLED_MESSAGE)
    if not snippet:
        return SummaryResult(message=NO_CONTENT_MESSAGE)
    if llm is None:
        raise ValueError("An LLM provider is required to summarize content")
    return summarize(llm, prompt_prefix, snippet)
