"""Locations of the configuration and sync directories."""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

SYNC_DIR_ENV = "AW_SYNC_DIR"


def get_config_dir() -> Path:
    """Return the sync configuration directory, creating it if needed."""
    directory = Path(platformdirs.user_config_path()) / "activitywatch" / "aw-sync"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_sync_dir() -> Path:
    """Return the sync directory: ``$AW_SYNC_DIR`` if set, else ``~/ActivityWatchSync``."""
    env_dir = os.environ.get(SYNC_DIR_ENV)
    if env_dir is not None:
        return Path(env_dir)
    return Path.home() / "ActivityWatchSync"