"""Configuration loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

PROVIDERS = ("gemini", "claude", "openai")
FETCH_BACKENDS = ("httpx", "firecrawl")
PAGE_CONTENT_MODES = ("with_summary", "always")

DEFAULT_PROMPT = (
    "Summarize the following web page content as a short list of bullet "
    "points covering its key ideas:\n\n"
)


@dataclass
class ClipPolicy:
    """Template choices for the assembled clipping.

    paragraph_separator: how paragraphs are joined before building the snippet.
    page_content: "with_summary" omits the Page Content section in
        extraction-only mode, "always" includes it unconditionally.
    collapse_comment_newlines: fold line breaks in the comment into spaces.
    """

    paragraph_separator: str = "\n\n"
    page_content: str = "with_summary"
    collapse_comment_newlines: bool = True

    def includes_page_content(self, extract_only: bool) -> bool:
        if self.page_content == "always":
            return True
        return not extract_only


@dataclass
class Config:
    """Application configuration."""

    google_api_key: str = ""
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    firecrawl_api_key: str = ""
    vault_path: Path = field(default_factory=lambda: Path.cwd() / "vault_output")
    prompt: str = DEFAULT_PROMPT
    llm_provider: str = "gemini"
    model: str = ""
    fetch_backend: str = "httpx"
    fetch_timeout: float = 20.0
    policy: ClipPolicy = field(default_factory=ClipPolicy)
    verbose: bool = False

    @property
    def default_model(self) -> str:
        if self.model:
            return self.model
        if self.llm_provider == "claude":
            return "claude-sonnet-4-20250514"
        if self.llm_provider == "openai":
            return "gpt-4o"
        return "gemini-2.0-flash"

    @property
    def api_key(self) -> str:
        """API key for the configured summarization provider."""
        if self.llm_provider == "claude":
            return self.anthropic_api_key
        if self.llm_provider == "openai":
            return self.openai_api_key
        return self.google_api_key

    def validate(self, summarize: bool = True) -> None:
        """Validate required configuration.

        Provider credentials are only checked when summarization will run.
        """
        if self.llm_provider not in PROVIDERS:
            raise ConfigError(
                f"Unknown LLM provider: {self.llm_provider}. "
                f"Use one of: {', '.join(PROVIDERS)}."
            )
        if summarize and not self.api_key:
            env_name = {
                "gemini": "GOOGLE_API_KEY",
                "claude": "ANTHROPIC_API_KEY",
                "openai": "OPENAI_API_KEY",
            }[self.llm_provider]
            raise ConfigError(
                f"{env_name} is required when using the {self.llm_provider} provider."
            )
        if self.fetch_backend not in FETCH_BACKENDS:
            raise ConfigError(
                f"Unknown fetch backend: {self.fetch_backend}. Use 'httpx' or 'firecrawl'."
            )
        if self.fetch_backend == "firecrawl" and not self.firecrawl_api_key:
            raise ConfigError(
                "FIRECRAWL_API_KEY is required when using the firecrawl backend."
            )
        if self.fetch_timeout <= 0:
            raise ConfigError("fetch_timeout must be positive.")
        if self.policy.page_content not in PAGE_CONTENT_MODES:
            raise ConfigError(
                f"Unknown page content mode: {self.policy.page_content}."
            )


def load_config(
    vault_path: Optional[str] = None,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    prompt: Optional[str] = None,
    fetch_backend: Optional[str] = None,
    page_content: Optional[str] = None,
    keep_comment_newlines: bool = False,
    summarize: bool = True,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    try:
        fetch_timeout = float(os.getenv("FETCH_TIMEOUT", "20"))
    except ValueError as e:
        raise ConfigError(f"FETCH_TIMEOUT must be a number: {e}") from e

    config = Config(
        google_api_key=os.getenv("GOOGLE_API_KEY", ""),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        firecrawl_api_key=os.getenv("FIRECRAWL_API_KEY", ""),
        vault_path=Path(vault_path) if vault_path else Path(
            os.getenv("OBSIDIAN_VAULT_PATH", str(Path.cwd() / "vault_output"))
        ),
        prompt=prompt or os.getenv("VAULTCLIP_PROMPT", DEFAULT_PROMPT),
        llm_provider=provider or os.getenv("LLM_PROVIDER", "gemini"),
        model=model or os.getenv("LLM_MODEL", ""),
        fetch_backend=fetch_backend or os.getenv("FETCH_BACKEND", "httpx"),
        fetch_timeout=fetch_timeout,
        policy=ClipPolicy(
            page_content=page_content or "with_summary",
            collapse_comment_newlines=not keep_comment_newlines,
        ),
        verbose=verbose,
    )

    config.validate(summarize=summarize)
    return config
