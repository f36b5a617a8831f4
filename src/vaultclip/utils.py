"""Utility functions for vaultclip."""

import re
from urllib.parse import urlparse

MAX_FILENAME_LENGTH = 200


def sanitize_filename(name: str, max_length: int = MAX_FILENAME_LENGTH) -> str:
    """Remove characters that are invalid in filenames and clip the length.

    A name made only of forbidden characters comes back as an empty string.
    """
    name = re.sub(r'[<>:"/\\|?*]+', "", name)
    return name[:max_length]


def extract_domain(url: str) -> str:
    """Extract the domain from a URL."""
    parsed = urlparse(url)
    domain = parsed.netloc
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
