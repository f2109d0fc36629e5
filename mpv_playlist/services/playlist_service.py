"""Service for writing playlists to the temporary directory."""

import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from mpv_playlist.config import PLAYLIST_FILENAME
from mpv_playlist.errors import MaterializationError
from mpv_playlist.utils.logger import app_logger


def get_playlist_path(directory: Optional[str] = None) -> Path:
    """Return the fixed playlist location.

    The name never changes, so repeated invocations overwrite one file
    instead of piling up new ones.

    Args:
        directory: Directory to use instead of the platform temp directory

    Returns:
        Path: Full path of the playlist file
    """
    root = Path(directory) if directory else Path(tempfile.gettempdir())
    return root / PLAYLIST_FILENAME


def write_playlist(urls: Iterable[str], directory: Optional[str] = None) -> Path:
    """Write URLs one per line to the playlist file.

    Content goes to a uniquely named sibling temp file first and is then
    renamed over the playlist, so a failed or concurrent write never leaves
    a partial playlist behind. Concurrent writers race on the rename and the
    last one wins.
    No trailing newline is written; an empty sequence gives an empty file.

    Args:
        urls: URLs in playlist order
        directory: Directory to use instead of the platform temp directory

    Returns:
        Path: Full path of the written playlist

    Raises:
        MaterializationError: If the file cannot be created or written
    """
    target_path = get_playlist_path(directory)
    content = "\n".join(urls)

    # Each writer gets its own temp file; only the target name is shared
    try:
        fd, temp_name = tempfile.mkstemp(
            dir=target_path.parent, prefix=f".{target_path.name}.", suffix=".tmp"
        )
    except OSError as e:
        app_logger.error(f"Failed to create temp file for playlist {target_path}: {e}")
        raise MaterializationError(f"Could not write playlist {target_path}: {e}") from e

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        os.replace(temp_path, target_path)
    except OSError as e:
        app_logger.error(f"Failed to write playlist {target_path}: {e}")
        try:
            temp_path.unlink()
        except OSError:
            pass  # Already renamed or removed
        raise MaterializationError(f"Could not write playlist {target_path}: {e}") from e

    app_logger.info(f"Wrote playlist to {target_path}")
    return target_path
