"""Discovery of remote databases in the sync directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from awkit.dirs import get_sync_dir

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _contains_db_file(directory: Path) -> bool:
    try:
        return any(entry.suffix == ".db" for entry in directory.iterdir())
    except OSError:
        return False


def _contains_subdir_with_db_file(directory: Path) -> bool:
    try:
        return any(
            entry.is_dir() and _contains_db_file(entry) for entry in directory.iterdir()
        )
    except OSError:
        return False


def get_remotes() -> list[str]:
    """Return the host names in the sync directory laid out as ``{host}/{device_id}/*.db``.

    The sync directory is created if it does not exist.
    """
    root = get_sync_dir()
    root.mkdir(parents=True, exist_ok=True)
    hostnames = sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and _contains_subdir_with_db_file(entry)
    )
    logger.info("Found remotes: %s", hostnames)
    return hostnames


def find_remotes(sync_directory: PathLike) -> list[Path]:
    """Return every ``*.db`` path one directory level below ``sync_directory``."""
    root = Path(sync_directory)
    return [
        path
        for subdir in sorted(root.iterdir())
        if subdir.is_dir()
        for path in sorted(subdir.iterdir())
        if path.suffix == ".db"
    ]


def find_remotes_nonlocal(
    sync_directory: PathLike, device_id: str, sync_db: Optional[PathLike] = None
) -> list[Path]:
    """Return remote databases, leaving out those whose path mentions ``device_id``.

    When ``sync_db`` is given, only databases at or below that path are returned.
    """
    limit = Path(sync_db) if sync_db is not None else None
    return [
        path
        for path in find_remotes(sync_directory)
        if device_id not in str(path)
        and (limit is None or path.is_relative_to(limit))
    ]