"""URL handling utilities."""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

# [label](url) with an http(s) URL made of word characters and URL punctuation
MARKDOWN_LINK_PATTERN = re.compile(
    r"\[[^\]]*\]\((https?://[\w:/?#\[\]@!$&'()*+,;=.~-]+)\)"
)

# Host extraction only accepts https; http URLs never yield a host
HTTPS_HOST_PATTERN = re.compile(r"^https://([^/?#]+)(?:[/?#]|$)")


@dataclass(frozen=True)
class Candidate:
    """A URL found in a document and the offset it starts at."""

    url: str
    position: int


def iter_candidates(text: str) -> Iterator[Candidate]:
    """Yield the URLs of Markdown inline links in order of appearance.

    Each call starts a fresh scan of ``text``. Partial link syntax is skipped.

    Args:
        text (str): Raw document text

    Yields:
        Candidate: URL and its offset in ``text``
    """
    if not text:
        return

    for match in MARKDOWN_LINK_PATTERN.finditer(text):
        yield Candidate(url=match.group(1), position=match.start(1))


def extract_links(text: str) -> List[str]:
    """Return every Markdown link URL in ``text``, duplicates included."""
    return [candidate.url for candidate in iter_candidates(text)]


def get_https_host(url: str) -> Optional[str]:
    """Get the host part of an https URL.

    Args:
        url (str): URL to parse

    Returns:
        Optional[str]: Host (port included, case untouched), or None when the
        URL does not start with ``https://``
    """
    match = HTTPS_HOST_PATTERN.match(url)
    if not match:
        return None
    return match.group(1)
