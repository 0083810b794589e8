"""Dependency folder scanner."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from rc_dependencies.config import TargetNames
from rc_dependencies.core.paths import resolve_path
from rc_dependencies.models.scan_result import FolderWeight, ScanResult
from rc_dependencies.utils import bytes_to_human, dir_info

log = logging.getLogger(__name__)


class DependencyScanner:
    """Finds target folders below a root and measures each of them.

    A matched folder is never descended into, so targets nested inside
    another target (``node_modules/x/node_modules``) are reported only as
    part of the outer one.
    """

    def __init__(self, targets: TargetNames | None = None) -> None:
        self.targets = targets if targets is not None else TargetNames()

    def scan(self, root: Path) -> ScanResult:
        """Scan ``root`` and return every matched folder with its size.

        Args:
            root: Canonical absolute directory to search.  The root itself
                is never a match candidate, only what lies below it.

        Raises:
            PathResolutionError: if a matched folder cannot be canonicalized.
        """
        entries = self._walk(root)
        result = ScanResult(root=root, entries=entries)
        log.info(
            "Found %d dependency folders under %s (%s)",
            len(result.entries), root, result.human_total,
        )
        return result

    def _walk(self, root: Path) -> list[FolderWeight]:
        """Depth-first walk in listing order, driven by an explicit stack.

        Each frame is an iterator over one directory's already-listed
        children, so arbitrarily deep trees never touch the recursion limit.
        """
        found: list[FolderWeight] = []
        stack: list[Iterator[os.DirEntry]] = [iter(self._list_dir(root))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                if entry.is_symlink() or entry.is_file(follow_symlinks=False):
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                log.debug("Cannot access: %s", entry.path)
                continue

            if entry.name in self.targets:
                found.append(self._measure(root, entry))
            elif is_dir:
                stack.append(iter(self._list_dir(entry.path)))
        return found

    def _list_dir(self, current: Path | str) -> list[os.DirEntry]:
        try:
            # Materialize so the handle is closed before descending.
            with os.scandir(current) as it:
                return list(it)
        except OSError:
            log.debug("Cannot read directory: %s", current)
            return []

    def _measure(self, root: Path, entry: os.DirEntry) -> FolderWeight:
        path = resolve_path(root, entry.path)
        size, skipped = dir_info(path)
        if skipped:
            log.debug("Skipped %d unreadable entries in %s", skipped, path)
        human = bytes_to_human(size)
        log.info("%s: %s", path, human)
        return FolderWeight(name=entry.name, path=path, size_bytes=size, human=human)
