"""Service for deciding which extracted links belong in the playlist."""

import re
from typing import Iterable, List, Pattern

from mpv_playlist.config.filters import FilterConfig
from mpv_playlist.errors import FilterPatternError
from mpv_playlist.utils.logger import app_logger
from mpv_playlist.utils.url_utils import get_https_host


def split_patterns(value: str) -> List[str]:
    """Split a newline-separated allow-list into its non-empty lines.

    Lines are kept verbatim, so a pattern with stray spaces only matches
    URLs containing those spaces.
    """
    if not value:
        return []
    return [line for line in value.splitlines() if line]


def compile_url_pattern(pattern: str) -> Pattern[str]:
    """Compile one URL regex line.

    Raises:
        FilterPatternError: If the line is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise FilterPatternError(pattern, str(e)) from e


def matches_domain(url: str, domain_allow_list: str) -> bool:
    """Check whether the URL's host ends with an allowed domain.

    Only https URLs have a host here; http links never pass this check.

    Args:
        url (str): Candidate URL
        domain_allow_list (str): Newline-separated domain suffixes

    Returns:
        bool: True if any domain is a suffix of the host
    """
    domains = split_patterns(domain_allow_list)
    if not domains:
        return False

    host = get_https_host(url)
    if host is None:
        return False

    return any(host.endswith(domain) for domain in domains)


def matches_extension(url: str, extension_allow_list: str) -> bool:
    """Check whether the URL ends with ``.<ext>`` for an allowed extension.

    The comparison is case-sensitive and includes any query or fragment,
    so ``video.mp4?t=10`` does not end with ``.mp4``.
    """
    return any(
        url.endswith("." + extension)
        for extension in split_patterns(extension_allow_list)
    )


def matches_url_regex(url: str, url_regex_allow_list: str) -> bool:
    """Check whether any allowed regex is found anywhere in the URL.

    An invalid line is logged and skipped; the remaining lines are still tried.
    """
    for pattern in split_patterns(url_regex_allow_list):
        try:
            compiled = compile_url_pattern(pattern)
        except FilterPatternError as e:
            app_logger.warning(f"Skipping URL filter line: {e}")
            continue

        if compiled.search(url):
            return True

    return False


def should_keep(url: str, config: FilterConfig) -> bool:
    """Decide whether a URL goes into the playlist.

    Args:
        url (str): Candidate URL
        config (FilterConfig): Allow-lists

    Returns:
        bool: True if the domain, extension or regex filter accepts the URL
    """
    if matches_domain(url, config.domain_allow_list):
        app_logger.debug(f"[KEEP] Domain allowed: {url}")
        return True

    if matches_extension(url, config.extension_allow_list):
        app_logger.debug(f"[KEEP] Extension allowed: {url}")
        return True

    if matches_url_regex(url, config.url_regex_allow_list):
        app_logger.debug(f"[KEEP] URL pattern allowed: {url}")
        return True

    app_logger.debug(f"[SKIP] No filter matched: {url}")
    return False


def filter_urls(urls: Iterable[str], config: FilterConfig) -> List[str]:
    """Keep the allowed URLs, preserving order and duplicates."""
    return [url for url in urls if should_keep(url, config)]
