"""Title and paragraph extraction from page HTML."""

from bs4 import BeautifulSoup

from .models import PageContent

UNTITLED = "untitled"


def extract_page_content(html: str) -> PageContent:
    """Parse HTML and return the page title and its non-empty paragraphs.

    Uses the lenient stdlib-backed parser so malformed markup still yields
    whatever title and paragraphs can be recovered.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag else ""

    paragraphs = []
    for p in soup.find_all("p"):
        text = p.get_text().strip()
        if text:
            paragraphs.append(text)

    return PageContent(title=title or UNTITLED, paragraphs=tuple(paragraphs))
