"""Small helpers for creating folders and reading and writing text files."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

log = logging.getLogger(__name__)


def create_folder(folder_name: str | PathLike, base: str | PathLike | None = None) -> bool:
    """Create ``folder_name`` under ``base`` (the working directory by default).

    Returns True if the folder was created, False if it already existed.
    """
    path = Path(base) if base is not None else Path.cwd()
    path = path / folder_name
    try:
        path.mkdir()
    except FileExistsError:
        return False
    log.info("created folder %s", path)
    return True


def read_file(file_name: str | PathLike) -> str:
    """Return the whole text of a file; raises OSError if it cannot be read."""
    with open(file_name, encoding="utf-8") as handle:
        return handle.read()


def write_file(file_name: str | PathLike, text: str) -> None:
    """Replace the contents of a file with ``text``; raises OSError on failure."""
    with open(file_name, "w", encoding="utf-8") as handle:
        handle.write(text)
    log.info("wrote %s", file_name)