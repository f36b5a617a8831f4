"""Word-bounded snippet used as summarizer input."""

from typing import Sequence

MAX_WORDS = 700
ELLIPSIS = " ..."


def join_paragraphs(paragraphs: Sequence[str], separator: str = "\n\n") -> str:
    return separator.join(paragraphs)


def build_snippet(text: str, max_words: int = MAX_WORDS) -> str:
    """Cap text at max_words whitespace-separated words.

    Words are rejoined with single spaces; " ..." marks a cut. Empty or
    whitespace-only text gives an empty snippet.
    """
    words = text.split()
    if len(words) > max_words:
        return " ".join(words[:max_words]) + ELLIPSIS
    return " ".join(words)
