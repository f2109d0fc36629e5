"""Main entry point for the mpv playlist application."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from mpv_playlist.config import HOST, PORT, SETTINGS_FILE
from mpv_playlist.config.filters import (
    FILTER_FIELDS,
    FilterConfig,
    load_filter_config,
    update_config,
)
from mpv_playlist.errors import LaunchError, MaterializationError
from mpv_playlist.services.filter_service import filter_urls
from mpv_playlist.services.player_service import launch_player
from mpv_playlist.services.playlist_service import write_playlist
from mpv_playlist.utils.logger import app_logger
from mpv_playlist.utils.persistence import load_data, save_data
from mpv_playlist.utils.url_utils import extract_links

app = FastAPI(title="mpv playlist")

# Filter settings, loaded once and saved after every change
settings: FilterConfig = load_filter_config(load_data(SETTINGS_FILE, dict()))


@dataclass(frozen=True)
class PlaybackResult:
    """Outcome of a successful playback request."""

    playlist_path: Path
    urls: List[str]
    pid: Optional[int] = None


def build_playlist(text: str, config: FilterConfig) -> List[str]:
    """Extract the document's links and keep the ones the filters allow.

    Args:
        text (str): Raw document text
        config (FilterConfig): Allow-lists

    Returns:
        List[str]: Playlist entries in document order
    """
    links = extract_links(text)
    urls = filter_urls(links, config)
    app_logger.info(f"Kept {len(urls)} of {len(links)} links")
    return urls


def play_document(
    text: str, config: FilterConfig, directory: Optional[str] = None
) -> PlaybackResult:
    """Build the playlist, write it and start the player on it.

    The player is started even when no link passed the filters.

    Raises:
        MaterializationError: If the playlist cannot be written
        LaunchError: If the player cannot be started
    """
    urls = build_playlist(text, config)
    playlist_path = write_playlist(urls, directory)
    process = launch_player(playlist_path)
    return PlaybackResult(
        playlist_path=playlist_path,
        urls=urls,
        pid=getattr(process, "pid", None),
    )


def persist_settings(data: dict) -> None:
    """Save filter settings to the settings file."""
    save_data(data, SETTINGS_FILE)


class PlayRequest(BaseModel):
    text: str


class SettingUpdate(BaseModel):
    value: str


@app.post("/play")
async def play(request: PlayRequest):
    """Play the links of a document with the current settings.

    Args:
        request: Document text

    Returns:
        dict: Playlist path and number of entries
    """
    try:
        result = play_document(request.text, settings)
    except (MaterializationError, LaunchError) as e:
        app_logger.error(f"Playback failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "status": "launched",
        "playlist_path": str(result.playlist_path),
        "count": len(result.urls),
    }


@app.get("/settings")
async def get_settings():
    """Return the current filter settings."""
    return settings.to_dict()


@app.put("/settings/{field}")
async def put_setting(field: str, update: SettingUpdate):
    """Change one filter field and save the settings.

    Args:
        field: One of the FilterConfig field names
        update: New newline-separated value

    Returns:
        dict: All settings after the change
    """
    global settings

    if field not in FILTER_FIELDS:
        raise HTTPException(status_code=404, detail=f"Unknown setting: {field}")

    try:
        settings = update_config(settings, field, update.value, persist_settings)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Could not save settings: {e}")

    app_logger.info(f"Updated setting {field}")
    return settings.to_dict()


@app.get("/health")
async def health_check():
    """Health check endpoint.

    Returns:
        dict: Status message
    """
    return {"status": "healthy"}


def read_document(path: str) -> str:
    """Read a document from a file, or stdin for ``-``."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Play the video links of a Markdown document in mpv')
    parser.add_argument('file', nargs='?', help='Markdown file to play, or - for stdin')
    parser.add_argument('--dry-run', action='store_true', help='Print the playlist instead of playing it')
    parser.add_argument('--serve', action='store_true', help='Run the HTTP trigger server')
    args = parser.parse_args(argv)

    if args.serve:
        import uvicorn
        uvicorn.run(app, host=HOST, port=PORT)
        return 0

    if not args.file:
        parser.error("a file is required unless --serve is given")

    try:
        text = read_document(args.file)
    except OSError as e:
        app_logger.error(f"Could not read {args.file}: {e}")
        return 1

    if args.dry_run:
        for url in build_playlist(text, settings):
            print(url)
        return 0

    try:
        result = play_document(text, settings)
    except (MaterializationError, LaunchError) as e:
        app_logger.error(f"Playback failed: {e}")
        return 1

    app_logger.info(f"Playing {len(result.urls)} entries from {result.playlist_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
