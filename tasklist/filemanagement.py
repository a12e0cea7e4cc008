"""Location, opening and locking of the CSV file that holds the tasks."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import TextIO

import portalocker

_DATA_DIR = ".todo"
_DATA_FILE = "data.csv"


def get_csv_path(home: str | os.PathLike[str] | None = None) -> Path:
    """Return the path of the data file, creating its directory if needed.

    The directory is ``.todo`` under ``home``, or under the user's home
    directory when ``home`` is not given.
    """
    if home is None:
        try:
            base = Path.home()
        except RuntimeError as exc:
            raise OSError(str(exc)) from exc
    else:
        base = Path(home)
    directory = base / _DATA_DIR
    with contextlib.suppress(OSError):
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
    return directory / _DATA_FILE


def load_file(path: str | os.PathLike[str]) -> TextIO:
    """Open the file for reading and writing, creating it, and lock it exclusively."""
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o777)
    except OSError as exc:
        raise OSError("failed to open file for reading") from exc
    handle = os.fdopen(fd, "r+", newline="", encoding="utf-8")
    try:
        portalocker.lock(handle, portalocker.LOCK_EX)
    except Exception:
        handle.close()
        raise
    return handle


def close_file(handle: TextIO) -> None:
    """Release the lock on the file and close it."""
    with contextlib.suppress(Exception):
        portalocker.unlock(handle)
    handle.close()