"""Obsidian markdown formatting for clippings."""

import re
from typing import Sequence

from .config import ClipPolicy
from .models import ClipRequest

NO_COMMENTS = "_no comments_"


def format_details(title: str, url: str, tags: Sequence[str]) -> str:
    """Render the Details callout; the tags line only appears when there are tags."""
    lines = [
        "\n> [!info] Details",
        f"> **Title:** {title}",
        f"> **URL:** {url}",
    ]
    if tags:
        lines.append("> **Tags:** " + " ".join(f"#{tag}" for tag in tags))
    return "\n".join(lines)


def format_comment(comment: str, collapse_newlines: bool = True) -> str:
    text = comment or NO_COMMENTS
    if collapse_newlines:
        text = re.sub(r"(?:\r?\n)+", " ", text)
    return text.strip() or NO_COMMENTS


def format_clipping(
    request: ClipRequest,
    title: str,
    summary: str,
    paragraphs: Sequence[str],
    policy: ClipPolicy,
) -> str:
    """Assemble the full clipping document.

    Sections are Details, Comments, AI Summary and, when the policy asks
    for it, Page Content with one block per paragraph.
    """
    comment = format_comment(request.comment or "", policy.collapse_comment_newlines)
    sections = [
        format_details(title, request.url, request.tag_list()),
        f"> [!documentation] Comments\n{comment}",
        "## AI Summary",
        summary,
    ]
    if policy.includes_page_content(request.extract_only):
        sections.extend(["## Page Content", *paragraphs])
    return "\n\n".join(sections)
