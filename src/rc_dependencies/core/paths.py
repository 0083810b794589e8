"""Path resolution for scan roots and matched folders."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class PathResolutionError(Exception):
    """Raised when a path does not exist or cannot be canonicalized.

    This is fatal for the whole run: the CLI reports it and exits non-zero
    without emitting any partial result.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


def resolve_path(base: Path | str, path: Path | str) -> Path:
    """Join ``path`` onto ``base`` and return its canonical absolute form.

    Symlinks and ``.``/``..`` segments are resolved by the filesystem.
    An absolute ``path`` replaces ``base`` entirely.

    Raises:
        PathResolutionError: if the joined path is missing or cannot be
            canonicalized.
    """
    full_path = Path(base) / path
    try:
        exists = full_path.exists()
    except OSError as e:
        raise PathResolutionError(full_path, f"Cannot access path ({e.strerror})") from e
    if not exists:
        raise PathResolutionError(full_path, "Path does not exist")

    try:
        return full_path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        # Symlink loops raise RuntimeError before Python 3.13.
        raise PathResolutionError(full_path, f"Error canonicalizing path ({e})") from e


def resolve_root(folder: Path | str) -> Path:
    """Resolve a user-supplied scan root against the working directory."""
    try:
        cwd = Path.cwd()
    except OSError as e:
        raise PathResolutionError(Path(folder), f"Cannot get current directory ({e.strerror})") from e
    root = resolve_path(cwd, folder)
    log.debug("Scan root: %s", root)
    return root
