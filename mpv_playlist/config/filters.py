"""Filter configurations for deciding which links go to the player."""

from dataclasses import dataclass, asdict, replace
from typing import Any, Callable, Dict, Mapping, Optional

from mpv_playlist.utils.logger import app_logger

# Domains whose links are sent to the player by default
default_domains = [
    'youtube.com',
    'youtu.be',
    'reddit.com',
    'twitch.tv',
]

# File extensions (without the leading dot) sent to the player by default
default_extensions = [
    'mp4',
    'webm',
    'mkv',
    'flv',
    'avi',
    'wmv',
    'mpg',
    'mpeg',
    '3gp',
]


@dataclass(frozen=True)
class FilterConfig:
    """Allow-lists used by the filter engine.

    Each field holds newline-separated patterns. An empty field matches nothing.
    """

    domain_allow_list: str = "\n".join(default_domains)
    extension_allow_list: str = "\n".join(default_extensions)
    url_regex_allow_list: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


FILTER_FIELDS = tuple(FilterConfig.__dataclass_fields__)


def load_filter_config(store: Optional[Mapping[str, Any]]) -> FilterConfig:
    """Overlay stored settings on the defaults.

    Args:
        store: Key-value settings as loaded from the settings store, may be None

    Returns:
        FilterConfig: Defaults with every known, string-valued key replaced
    """
    if not store:
        return FilterConfig()

    if not isinstance(store, Mapping):
        app_logger.warning(f"Ignoring settings of type {type(store).__name__}, using defaults")
        return FilterConfig()

    overrides = {
        key: value
        for key, value in store.items()
        if key in FILTER_FIELDS and isinstance(value, str)
    }
    return replace(FilterConfig(), **overrides)


def update_config(
    config: FilterConfig,
    field: str,
    value: str,
    persist: Callable[[Dict[str, str]], Any],
) -> FilterConfig:
    """Change one filter field and hand the result to the settings store.

    Args:
        config: Current configuration
        field: Name of the field to change
        value: New newline-separated pattern list
        persist: Callable that saves the settings dictionary

    Returns:
        FilterConfig: The updated configuration

    Raises:
        ValueError: If ``field`` is not a filter field
    """
    if field not in FILTER_FIELDS:
        raise ValueError(f"Unknown filter field: {field}")

    updated = replace(config, **{field: value})
    persist(updated.to_dict())
    return updated
