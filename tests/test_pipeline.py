"""End-to-end clipping runs with a mocked page and stub providers."""

from pathlib import Path

import httpx
import pytest

from vaultclip.config import ClipPolicy, Config
from vaultclip.exceptions import FetchError, LLMError, PersistenceError
from vaultclip.llm.gemini import GeminiProvider
from vaultclip.models import ClipRequest
from vaultclip.pipeline import create_clipping
from vaultclip.summarizer import DISABLED_MESSAGE, FAILED_MESSAGE, NO_CONTENT_MESSAGE

PAGE = """
<html>
  <head><title>Bessie Coleman</title></head>
  <body>
    <p>First paragraph.</p>
    <p> </p>
    <p>Second paragraph.</p>
    <p>Third paragraph.</p>
  </body>
</html>
"""


class _StubLLM:
    model = "stub"

    def __init__(self, response: str = "", error: Exception = None):
        self.response = response
        self.error = error
        self.prompts = []

    def generate(self, prompt, max_output_tokens=None):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.response


def _page(html: str = PAGE) -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: httpx.Response(200, text=html))


def _summary_section(document: str) -> str:
    after = document.split("## AI Summary\n\n", 1)[1]
    return after.split("\n\n## Page Content", 1)[0]


def _config(tmp_path: Path, **policy) -> Config:
    return Config(vault_path=tmp_path, prompt="Summarize: ", policy=ClipPolicy(**policy))


def test_summary_is_normalized_and_written(tmp_path):
    llm = _StubLLM(response="Here's the summary:\n* Point one\n* Point two")
    request = ClipRequest(url="https://example.com/bessie", tags="a, b ,c", folder="People")

    result = create_clipping(request, _config(tmp_path), llm, transport=_page())

    assert result.path == tmp_path / "People" / "Bessie Coleman.md"
    written = result.path.read_text(encoding="utf-8")
    assert written == result.document
    assert _summary_section(written) == "- Point one\n- Point two"
    assert "> **Tags:** #a #b #c" in written
    assert written.endswith(
        "## Page Content\n\nFirst paragraph.\n\nSecond paragraph.\n\nThird paragraph."
    )
    assert llm.prompts == [
        "Summarize: First paragraph. Second paragraph. Third paragraph."
    ]
    assert result.warnings == []


def test_summarizer_failure_still_writes_file(tmp_path):
    llm = _StubLLM(error=LLMError("Gemini API error: HTTP 503"))

    result = create_clipping(
        ClipRequest(url="https://example.com/bessie"), _config(tmp_path), llm, transport=_page()
    )

    written = result.path.read_text(encoding="utf-8")
    assert _summary_section(written) == FAILED_MESSAGE
    assert "## Page Content" in written
    assert result.summary.failed
    assert result.warnings == ["Summarization failed: Gemini API error: HTTP 503"]


def test_empty_page_skips_summarizer(tmp_path):
    llm = _StubLLM(response="never used")
    html = "<title>Empty</title><p>   </p>"

    result = create_clipping(
        ClipRequest(url="https://example.com/empty"), _config(tmp_path), llm, transport=_page(html)
    )

    assert _summary_section(result.document) == NO_CONTENT_MESSAGE
    assert llm.prompts == []
    assert result.path.name == "Empty.md"


def test_extract_only_mode(tmp_path):
    request = ClipRequest(url="https://example.com/bessie", extract_only=True, comment="keep\nthis")

    result = create_clipping(request, _config(tmp_path), None, transport=_page())

    assert result.document.endswith("## AI Summary\n\n" + DISABLED_MESSAGE)
    assert "> [!documentation] Comments\nkeep this" in result.document


def test_extract_only_with_always_policy_keeps_page_content(tmp_path):
    request = ClipRequest(url="https://example.com/bessie", extract_only=True)

    result = create_clipping(
        request, _config(tmp_path, page_content="always"), None, transport=_page()
    )

    assert "## Page Content\n\nFirst paragraph." in result.document


def test_title_override_names_the_file(tmp_path):
    request = ClipRequest(url="https://example.com/bessie", title="Queen Bess: pilot?")

    result = create_clipping(request, _config(tmp_path), _StubLLM("ok"), transport=_page())

    assert result.path.name == "Queen Bess pilot.md"
    assert "> **Title:** Queen Bess: pilot?" in result.document


def test_untitled_page(tmp_path):
    result = create_clipping(
        ClipRequest(url="https://example.com/x"),
        _config(tmp_path),
        _StubLLM("ok"),
        transport=_page("<p>text</p>"),
    )

    assert result.path.name == "untitled.md"


def test_space_separator_policy_changes_only_the_snippet(tmp_path):
    llm = _StubLLM("ok")

    create_clipping(
        ClipRequest(url="https://example.com/bessie"),
        _config(tmp_path, paragraph_separator=" "),
        llm,
        transport=_page(),
    )

    assert llm.prompts == [
        "Summarize: First paragraph. Second paragraph. Third paragraph."
    ]


def test_fetch_failure_writes_nothing(tmp_path):
    transport = httpx.MockTransport(lambda request: httpx.Response(502))

    with pytest.raises(FetchError):
        create_clipping(
            ClipRequest(url="https://example.com/bessie"),
            _config(tmp_path),
            _StubLLM("ok"),
            transport=transport,
        )
    assert list(tmp_path.iterdir()) == []


def test_unexpected_provider_exception_still_writes_file(tmp_path):
    llm = _StubLLM(error=RuntimeError("response had no choices"))

    result = create_clipping(
        ClipRequest(url="https://example.com/bessie"), _config(tmp_path), llm, transport=_page()
    )

    written = result.path.read_text(encoding="utf-8")
    assert _summary_section(written) == FAILED_MESSAGE
    assert result.warnings == ["Summarization failed: response had no choices"]


def test_malformed_gemini_response_still_writes_file(tmp_path):
    def handler(request):
        if request.url.host == "generativelanguage.googleapis.com":
            return httpx.Response(200, json={"candidates": [{"content": {"parts": ["oops"]}}]})
        return httpx.Response(200, text=PAGE)

    transport = httpx.MockTransport(handler)
    llm = GeminiProvider(api_key="g-key", transport=transport)

    result = create_clipping(
        ClipRequest(url="https://example.com/bessie"), _config(tmp_path), llm, transport=transport
    )

    written = result.path.read_text(encoding="utf-8")
    assert _summary_section(written) == FAILED_MESSAGE
    assert "## Page Content\n\nFirst paragraph." in written
    assert result.summary.failed


def test_folder_outside_vault_writes_nothing(tmp_path):
    vault = tmp_path / "vault"

    request = ClipRequest(url="https://example.com/bessie", folder="../../elsewhere", extract_only=True)

    with pytest.raises(PersistenceError, match="outside the vault"):
        create_clipping(
            request,
            Config(vault_path=vault),
            None,
            transport=_page(),
        )
    assert list(tmp_path.iterdir()) == []
