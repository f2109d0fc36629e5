"""JSON file persistence for settings."""

import json
import os
from typing import Any

from mpv_playlist.utils.logger import app_logger


def load_data(file_path: str, default: Any) -> Any:
    """Load JSON data from a file.

    Args:
        file_path (str): Path to the JSON file
        default: Value returned when the file is missing or unreadable

    Returns:
        Loaded data, or ``default``
    """
    if not os.path.exists(file_path):
        app_logger.info(f"No data file at {file_path}, using defaults")
        return default

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        app_logger.error(f"Error loading data from {file_path}: {e}")
        return default


def save_data(data: Any, file_path: str) -> None:
    """Save data to a JSON file.

    Args:
        data: JSON-serializable data
        file_path (str): Destination path
    """
    try:
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        app_logger.debug(f"Saved data to {file_path}")
    except OSError as e:
        app_logger.error(f"Error saving data to {file_path}: {e}")
        raise
