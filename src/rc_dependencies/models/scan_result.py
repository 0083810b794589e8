"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rc_dependencies.utils import bytes_to_human


@dataclass(frozen=True, slots=True)
class FolderWeight:
    """A matched dependency folder and the size of everything below it."""

    name: str
    path: Path
    size_bytes: int
    human: str


@dataclass(slots=True)
class ScanResult:
    """Result of scanning one root for dependency folders.

    The total is derived from ``entries`` so it can never drift from the
    sum of the reported weights.
    """

    root: Path
    entries: list[FolderWeight] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(e.size_bytes for e in self.entries)

    @property
    def human_total(self) -> str:
        return bytes_to_human(self.total_bytes)
