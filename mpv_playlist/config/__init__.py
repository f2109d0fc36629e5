"""Runtime configuration read from the environment."""

import os

# External player and the playlist it is handed
PLAYER_COMMAND = os.getenv("PLAYER_COMMAND", "mpv")
PLAYLIST_FILENAME = os.getenv("PLAYLIST_FILENAME", "mpv_playlist.txt")

# Filter settings store
SETTINGS_FILE = os.getenv("SETTINGS_FILE", "settings.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# HTTP trigger surface
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
