"""Service for starting the external player."""

import os
import subprocess
import sys
from pathlib import Path
from typing import Sequence, Union

from mpv_playlist.config import PLAYER_COMMAND
from mpv_playlist.errors import LaunchError
from mpv_playlist.utils.logger import app_logger


def spawn_detached(executable: str, args: Sequence[str]) -> subprocess.Popen:
    """Start a process that outlives this one and shares none of its streams.

    The returned handle is never waited on; the caller has no further say in
    the process's lifetime.

    Args:
        executable (str): Command to run, resolved through PATH
        args: Arguments passed after the command

    Returns:
        subprocess.Popen: Handle of the started process

    Raises:
        LaunchError: If the executable cannot be started
    """
    cmd = [executable, *args]
    kwargs = {
        'stdin': subprocess.DEVNULL,
        'stdout': subprocess.DEVNULL,
        'stderr': subprocess.DEVNULL,
        'close_fds': True,
    }
    if sys.platform == 'win32':
        kwargs['creationflags'] = (
            subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        )
    else:
        kwargs['start_new_session'] = True  # Detach from parent process

    try:
        process = subprocess.Popen(cmd, **kwargs)
    except OSError as e:
        app_logger.error(f"Failed to start {executable}: {e}")
        raise LaunchError(f"Could not start {executable}: {e}") from e

    app_logger.info(f"Started {executable} (PID: {process.pid})")
    return process


def launch_player(playlist_path: Union[str, os.PathLike]) -> subprocess.Popen:
    """Open a playlist file in the player.

    Args:
        playlist_path: Path of the playlist file

    Returns:
        subprocess.Popen: Handle of the player process
    """
    return spawn_detached(PLAYER_COMMAND, [f"--playlist={Path(playlist_path)}"])
