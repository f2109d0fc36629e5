"""Errors raised while building and launching a playlist."""


class MpvPlaylistError(Exception):
    """Base class for all playlist errors."""


class FilterPatternError(MpvPlaylistError):
    """A single URL regex line could not be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid URL pattern '{pattern}': {reason}")


class MaterializationError(MpvPlaylistError):
    """The playlist file could not be written."""


class LaunchError(MpvPlaylistError):
    """The player process could not be started."""
