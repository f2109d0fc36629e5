"""Test configuration and fixtures."""

from types import SimpleNamespace

import pytest

import mpv_playlist.main as main
from mpv_playlist.config.filters import FilterConfig


@pytest.fixture(autouse=True)
def isolate_runtime_state(monkeypatch):
    """Prevent tests from starting players or writing settings files."""
    monkeypatch.setattr(main, "settings", FilterConfig())
    monkeypatch.setattr(main, "save_data", lambda *args, **kwargs: None)


@pytest.fixture
def launched(monkeypatch):
    """Record player launches instead of starting a process."""
    calls = []

    def fake_launch(playlist_path):
        calls.append(playlist_path)
        return SimpleNamespace(pid=4242)

    monkeypatch.setattr(main, "launch_player", fake_launch)
    return calls


@pytest.fixture
def playlist_dir(tmp_path, monkeypatch):
    """Point the playlist writer at a per-test directory."""
    monkeypatch.setattr("tempfile.gettempdir", lambda: str(tmp_path))
    return tmp_path
