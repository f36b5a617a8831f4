"""Clipping pipeline: fetch, extract, summarize, assemble, write."""

from typing import Optional

import click

from .config import Config
from .extractor import extract_page_content
from .fetcher import fetch_html
from .formatter import format_clipping
from .llm.base import LLMProvider
from .models import ClipRequest, ClipResult
from .snippet import build_snippet, join_paragraphs
from .summarizer import resolve_summary
from .writer import write_clipping


def create_clipping(
    request: ClipRequest,
    config: Config,
    llm: Optional[LLMProvider] = None,
    verbose: bool = False,
    transport=None,
) -> ClipResult:
    """Run one clipping end to end and return what was written.

    FetchError and PersistenceError propagate; a summarization failure is
    recorded on the result and the clipping is still written.
    """
    click.echo("  Fetching page...")
    html = fetch_html(request.url, config, transport=transport)
    page = extract_page_content(html)

    title = (request.title or "").strip() or page.title
    if verbose:
        click.echo(f"  Title: {title}")
        click.echo(f"  Paragraphs: {len(page.paragraphs)}")

    text = join_paragraphs(page.paragraphs, config.policy.paragraph_separator)
    snippet = build_snippet(text)

    if not request.extract_only and snippet:
        click.echo("  Summarizing content...")
    summary = resolve_summary(llm, config.prompt, snippet, request.extract_only)

    warnings = []
    if summary.failed:
        warning = f"Summarization failed: {summary.error}"
        warnings.append(warning)
        click.echo(f"  Warning: {warning}", err=True)
    elif verbose and summary.text is not None:
        click.echo(f"    Done: {len(summary.text)} chars")

    document = format_clipping(
        request,
        title=title,
        summary=summary.message,
        paragraphs=page.paragraphs,
        policy=config.policy,
    )
    path = write_clipping(document, title, config.vault_path, request.folder)

    return ClipResult(
        path=path,
        title=title,
        document=document,
        summary=summary,
        warnings=warnings,
    )
