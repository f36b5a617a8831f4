"""Page fetching and URL validation.

Two backends return raw HTML for the extractor:
1. httpx: plain GET following redirects (default)
2. firecrawl: Firecrawl scrape asking for the raw page HTML
"""

import re

import httpx
from firecrawl import FirecrawlApp

from .config import Config
from .exceptions import FetchError, ValidationError

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

_URL_PATTERN = re.compile(r"^(https?)://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


def _client(timeout: float, transport=None) -> httpx.Client:
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
        transport=transport,
    )


def validate_url(url: str, timeout: float = 20.0, check_reachable: bool = True, transport=None) -> str:
    """Check a submitted URL, raising ValidationError with the field message.

    Pattern checks run first; the live reachability probe only runs for
    well-formed https URLs.
    """
    url = (url or "").strip()
    if not url:
        raise ValidationError("Field is empty.")
    if not _URL_PATTERN.match(url):
        raise ValidationError("Invalid URL")
    if not url.startswith("https://"):
        raise ValidationError("Requires https://")
    if not check_reachable:
        return url

    try:
        with _client(timeout, transport) as client:
            resp = client.get(url)
    except httpx.HTTPError as e:
        raise ValidationError("Failed to fetch URL.") from e
    if not resp.is_success:
        raise ValidationError("URL not reachable.")
    return url


def fetch_html(url: str, config: Config, transport=None) -> str:
    """Fetch the page HTML with the configured backend."""
    if config.fetch_backend == "firecrawl":
        return _fetch_firecrawl(url, config)
    return _fetch_httpx(url, config.fetch_timeout, transport)


def _fetch_httpx(url: str, timeout: float, transport=None) -> str:
    try:
        with _client(timeout, transport) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Failed to fetch {url}: HTTP {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e


def _fetch_firecrawl(url: str, config: Config) -> str:
    app = FirecrawlApp(api_key=config.firecrawl_api_key)

    try:
        result = app.scrape(url, formats=["rawHtml"])
    except Exception as e:
        raise FetchError(f"Failed to scrape {url}: {e}") from e

    if not result:
        raise FetchError(f"Empty response from Firecrawl for {url}")

    html = result.raw_html if hasattr(result, "raw_html") else result.get("rawHtml", "")
    if not html:
        raise FetchError(f"No HTML returned by Firecrawl for {url}")
    return html
