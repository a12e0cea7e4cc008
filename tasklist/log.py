"""Timestamped messages written to standard output."""

from __future__ import annotations

import sys
from datetime import datetime

_ERROR_PREFIX = "ERROR: "


def _emit(prefix: str, message: object) -> None:
    stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
    sys.stdout.write(f"{prefix}{stamp} {message}\n")
    sys.stdout.flush()


def log_error(err: BaseException | None) -> None:
    """Print the error, if there is one."""
    if err is not None:
        _emit(_ERROR_PREFIX, err)


def log_fatal(err: BaseException | None) -> None:
    """Print the error, if there is one, and exit with status 1."""
    log_error(err)
    if err is not None:
        sys.exit(1)


def log_info(message: str) -> None:
    """Print an informational message."""
    _emit("", message)