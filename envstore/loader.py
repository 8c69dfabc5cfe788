"""
envstore/loader.py
Reads a .env file into a list of trimmed lines.
"""

from __future__ import annotations

import logging
import os

from envstore.exceptions import FileEmptyError, FileUnreadableError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = ".env"


def compose_path(path: str, filename: str | None = None) -> str:
    """Join *path* and *filename*, ignoring trailing separators on *path*."""
    return os.path.join(path.rstrip("\\/") or os.sep, filename or DEFAULT_FILENAME)


def read_lines(file: str) -> list[str]:
    """Return the trimmed lines of *file*, skipping empty ones.

    Raises:
        FileUnreadableError: the file is missing, not a regular file,
            not readable or not valid UTF-8.
        FileEmptyError: the file holds no non-empty lines.
    """
    if not os.path.isfile(file) or not os.access(file, os.R_OK):
        raise FileUnreadableError(file)

    try:
        with open(file, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadableError(file) from e

    lines = [line.strip() for line in content.splitlines() if line]
    if not lines:
        raise FileEmptyError(file)

    logger.debug("Read %d line(s) from %s", len(lines), file)
    return lines
