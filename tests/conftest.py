import pytest

_ENV_VARS = (
    "OBSIDIAN_VAULT_PATH",
    "VAULTCLIP_PROMPT",
    "LLM_PROVIDER",
    "LLM_MODEL",
    "GOOGLE_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "FETCH_BACKEND",
    "FIRECRAWL_API_KEY",
    "FETCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's own settings out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("vaultclip.config.load_dotenv", lambda *a, **k: False)
