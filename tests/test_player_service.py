"""Test suite for launching the player."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from mpv_playlist.config import PLAYER_COMMAND
from mpv_playlist.errors import LaunchError
from mpv_playlist.services.player_service import launch_player, spawn_detached


def test_launch_player_passes_playlist_argument(tmp_path):
    playlist = tmp_path / "mpv_playlist.txt"
    with patch('subprocess.Popen') as mock_popen:
        mock_popen.return_value = MagicMock(pid=123)
        process = launch_player(playlist)

    assert process.pid == 123
    mock_popen.assert_called_once()
    cmd = mock_popen.call_args.args[0]
    assert cmd == [PLAYER_COMMAND, f"--playlist={playlist}"]


def test_spawn_detached_silences_streams_and_does_not_wait():
    with patch('subprocess.Popen') as mock_popen:
        process = spawn_detached("mpv", ["--playlist=/tmp/x"])

    kwargs = mock_popen.call_args.kwargs
    assert kwargs['stdin'] == subprocess.DEVNULL
    assert kwargs['stdout'] == subprocess.DEVNULL
    assert kwargs['stderr'] == subprocess.DEVNULL
    assert kwargs.get('start_new_session') or kwargs.get('creationflags')
    process.wait.assert_not_called()
    process.communicate.assert_not_called()


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError(2, "No such file or directory"),
        PermissionError(13, "Permission denied"),
    ],
)
def test_spawn_failure_raises_launch_error(error):
    with patch('subprocess.Popen', side_effect=error):
        with pytest.raises(LaunchError):
            spawn_detached("mpv", ["--playlist=/tmp/x"])


def test_missing_executable_raises_launch_error():
    with pytest.raises(LaunchError):
        spawn_detached("definitely-not-an-installed-player-binary", [])
