"""Target folder configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterator, Mapping

log = logging.getLogger(__name__)

ENV_VAR = "RC_DEPENDENCIES"
DEFAULT_TARGETS: tuple[str, ...] = ("node_modules", ".venv", "venv", ".git")


@dataclass(frozen=True, slots=True)
class TargetNames:
    """Ordered set of folder names reported as dependency folders.

    Matching is exact and case-sensitive, no globbing.  Built once at
    startup and passed to the scanner; never mutated during a scan.
    """

    names: tuple[str, ...] = DEFAULT_TARGETS

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    @classmethod
    def parse(cls, value: str) -> TargetNames:
        """Build from a comma-separated list, trimming each name.

        Blank items (``"a,,b"`` or a trailing comma) are dropped since no
        directory entry can have an empty name.
        """
        names = tuple(part.strip() for part in value.split(","))
        return cls(tuple(n for n in names if n))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TargetNames:
        """Read ``RC_DEPENDENCIES``, falling back to the default set."""
        env = os.environ if environ is None else environ
        value = env.get(ENV_VAR)
        if value is None:
            return cls()
        targets = cls.parse(value)
        log.debug("Target folders from %s: %s", ENV_VAR, list(targets))
        return targets
