"""Shared test fixtures."""

from __future__ import annotations

import errno
import os
import sys
from contextlib import contextmanager

import pytest

from rc_dependencies.config import ENV_VAR

# The deep-tree tests create ~1200 nested directories; pytest's recursive
# tmp-dir cleanup (shutil.rmtree) needs headroom beyond the default limit.
sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))


@pytest.fixture(autouse=True)
def clear_target_env(monkeypatch):
    """Keep the caller's RC_DEPENDENCIES from leaking into tests."""
    monkeypatch.delenv(ENV_VAR, raising=False)


@pytest.fixture
def make_tree(tmp_path):
    """Build a file tree from a dict: nested dicts are directories, ints are file sizes."""

    def _make(spec: dict, base=None):
        base = base or tmp_path
        for name, value in spec.items():
            path = base / name
            if isinstance(value, dict):
                path.mkdir()
                _make(value, path)
            else:
                path.write_bytes(b"x" * value)
        return base

    return _make


class _UnreadableEntry:
    """Directory entry whose type and metadata lookups all fail."""

    def __init__(self, entry: os.DirEntry) -> None:
        self.name = entry.name
        self.path = entry.path

    def _fail(self):
        raise PermissionError(errno.EACCES, "Permission denied", self.path)

    def stat(self, *, follow_symlinks: bool = True):
        self._fail()

    def is_symlink(self) -> bool:
        self._fail()

    def is_file(self, *, follow_symlinks: bool = True) -> bool:
        self._fail()

    def is_dir(self, *, follow_symlinks: bool = True) -> bool:
        self._fail()


@pytest.fixture
def failing_scandir(monkeypatch):
    """Make ``os.scandir`` fail for chosen directories or entry names.

    Works regardless of the user running the tests, unlike ``chmod``.
    """
    real_scandir = os.scandir

    def _install(*, unlistable=(), unreadable=()):
        unlistable_paths = {os.fspath(p) for p in unlistable}
        unreadable_names = set(unreadable)

        @contextmanager
        def fake_scandir(path="."):
            if os.fspath(path) in unlistable_paths:
                raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
            with real_scandir(path) as it:
                yield [_UnreadableEntry(e) if e.name in unreadable_names else e for e in it]

        monkeypatch.setattr(os, "scandir", fake_scandir)

    return _install
