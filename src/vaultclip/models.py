"""Data models for vaultclip."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PageContent:
    """Title and paragraph text extracted from one page."""

    title: str
    paragraphs: tuple[str, ...] = ()


@dataclass
class ClipRequest:
    """User input for a single clipping."""

    url: str
    title: Optional[str] = None
    folder: Optional[str] = None
    tags: Optional[str] = None
    comment: Optional[str] = None
    extract_only: bool = False

    def tag_list(self) -> list[str]:
        """Split the comma-separated tags, dropping empty entries."""
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


@dataclass(frozen=True)
class SummaryResult:
    """Outcome of the summarization stage.

    Exactly one of ``text`` and ``error`` is set when summarization ran.
    ``message`` is what ends up in the AI Summary section.
    """

    message: str
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class ClipResult:
    """What a finished clipping run produced."""

    path: Path
    title: str
    document: str
    summary: SummaryResult
    warnings: list[str] = field(default_factory=list)
