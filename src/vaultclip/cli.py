"""CLI entry point for vaultclip."""

import sys

import click

from .config import FETCH_BACKENDS, PAGE_CONTENT_MODES, PROVIDERS, load_config
from .exceptions import (
    ConfigError,
    FetchError,
    PersistenceError,
    ValidationError,
    VaultClipError,
)
from .fetcher import validate_url
from .llm import get_llm_provider
from .models import ClipRequest
from .pipeline import create_clipping
from .utils import extract_domain


@click.command()
@click.argument("url")
@click.option("--title", type=str, default=None, help="Note title (default: the page <title>)")
@click.option("--folder", type=str, default=None, help="Sub-folder under the vault root")
@click.option("--tags", type=str, default=None, help="Comma-separated tags, e.g. 'ai, reading'")
@click.option("--comment", type=str, default=None, help="Free-text comment for the Comments callout")
@click.option(
    "--extract-only",
    is_flag=True,
    default=False,
    help="Skip AI summarization (and, by default, the Page Content section)",
)
@click.option(
    "--provider",
    type=click.Choice(PROVIDERS),
    default=None,
    help="LLM provider (default: gemini, or LLM_PROVIDER env var)",
)
@click.option(
    "--model",
    type=str,
    default=None,
    help="LLM model (default: LLM_MODEL env var or the provider default)",
)
@click.option(
    "--vault-path",
    type=click.Path(file_okay=False),
    default=None,
    help="Path to Obsidian vault (default: ./vault_output or OBSIDIAN_VAULT_PATH env var)",
)
@click.option(
    "--prompt",
    type=str,
    default=None,
    help="Prompt prefix sent before the page text (default: VAULTCLIP_PROMPT env var)",
)
@click.option(
    "--fetch-backend",
    type=click.Choice(FETCH_BACKENDS),
    default=None,
    help="How to fetch the page (default: httpx, or FETCH_BACKEND env var)",
)
@click.option(
    "--page-content",
    type=click.Choice(PAGE_CONTENT_MODES),
    default=None,
    help="Include Page Content only with a summary, or always (default: with_summary)",
)
@click.option(
    "--keep-comment-newlines",
    is_flag=True,
    default=False,
    help="Keep line breaks in the comment instead of joining them",
)
@click.option(
    "--skip-reachability-check",
    is_flag=True,
    default=False,
    help="Do not probe the URL before clipping",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def main(
    url, title, folder, tags, comment, extract_only, provider, model, vault_path,
    prompt, fetch_backend, page_content, keep_comment_newlines,
    skip_reachability_check, verbose,
):
    """Clip a web page into an Obsidian note.

    Fetches URL, extracts its title and paragraphs, optionally summarizes
    them with an LLM and writes a markdown clipping into the vault.

    Example: vaultclip https://en.wikipedia.org/wiki/Bessie_Coleman --tags "history, aviation"
    """
    # Load config
    try:
        config = load_config(
            vault_path=vault_path,
            provider=provider,
            model=model,
            prompt=prompt,
            fetch_backend=fetch_backend,
            page_content=page_content,
            keep_comment_newlines=keep_comment_newlines,
            summarize=not extract_only,
            verbose=verbose,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    # Validate URL
    try:
        url = validate_url(
            url,
            timeout=config.fetch_timeout,
            check_reachable=not skip_reachability_check,
        )
    except ValidationError as e:
        click.echo(f"URL: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Vault path: {config.vault_path}")
        click.echo(f"Fetch backend: {config.fetch_backend} ({extract_domain(url)})")
        if not extract_only:
            click.echo(f"Provider: {config.llm_provider} ({config.default_model})")

    # Initialize LLM
    llm = None
    if not extract_only:
        try:
            llm = get_llm_provider(config)
        except Exception as e:
            click.echo(f"Failed to initialize LLM provider: {e}", err=True)
            sys.exit(2)

    request = ClipRequest(
        url=url,
        title=title,
        folder=folder,
        tags=tags,
        comment=comment,
        extract_only=extract_only,
    )

    click.echo(f"Processing: {url}")
    try:
        result = create_clipping(request, config, llm, verbose=config.verbose)
    except FetchError as e:
        click.echo(f"  Fetching failed: {e}", err=True)
        click.echo("Couldn't create clipping.", err=True)
        sys.exit(2)
    except PersistenceError as e:
        click.echo(f"  {e}", err=True)
        click.echo("Couldn't create clipping.", err=True)
        sys.exit(2)
    except VaultClipError as e:
        click.echo(f"  Clipping failed: {e}", err=True)
        click.echo("Couldn't create clipping.", err=True)
        sys.exit(2)

    click.echo(f"  Wrote clipping: {result.path}")
    click.echo(f'Clipping "{result.title}" created.')

    # Exit code
    if result.warnings:
        sys.exit(1)
    sys.exit(0)
