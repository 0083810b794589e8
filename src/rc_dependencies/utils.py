"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import stat
from collections import deque
from pathlib import Path

log = logging.getLogger(__name__)

_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


def dir_info(path: Path | str) -> tuple[int, int]:
    """Calculate the total size of all regular files below a directory.

    Walks breadth-first with an explicit queue so deep trees never touch
    the recursion limit.  Symlinks are never followed: only entries whose
    ``lstat`` reports a regular file or a directory are counted or queued.
    Directories that cannot be listed and entries whose metadata cannot be
    read contribute nothing.

    Returns:
        (total_bytes, skipped) tuple, where ``skipped`` is the number of
        directories and entries that had to be ignored.
    """
    total = 0
    skipped = 0
    queue: deque[Path | str] = deque([path])
    while queue:
        current = queue.popleft()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        st = entry.stat(follow_symlinks=False)
                    except OSError:
                        log.debug("Cannot stat: %s", entry.path)
                        skipped += 1
                        continue
                    if stat.S_ISREG(st.st_mode):
                        total += st.st_size
                    elif stat.S_ISDIR(st.st_mode):
                        queue.append(entry.path)
        except OSError:
            log.debug("Cannot read directory: %s", current)
            skipped += 1
    return total, skipped


def dir_size(path: Path | str) -> int:
    """Calculate total size of a directory tree."""
    return dir_info(path)[0]


def bytes_to_human(size_bytes: int) -> str:
    """Convert a byte count to a binary-unit string, e.g. ``1536 -> '1.5 KiB'``."""
    value = float(size_bytes)
    for unit in _UNITS[:-1]:
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {_UNITS[-1]}"


def lossy_str(value: Path | str) -> str:
    """Return ``value`` as text, replacing bytes that are not valid UTF-8."""
    return os.fsencode(value).decode("utf-8", errors="replace")
