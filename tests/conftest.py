from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory filesystem that records every query made by the resolver.
3. Detection of case-insensitive host filesystems for disk-based tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Set

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from detect_file.domain.conventions import POSIX, PathConvention  # noqa: E402


# -----------------------------------------------------------------------------
# In-Memory Filesystem
# -----------------------------------------------------------------------------
class FakeFileSystem:
    """
    Dictionary-backed filesystem keyed by canonical path.

    Paths ending with a separator are registered as directories, everything
    else as files. Directories listed in 'unreadable' fail to list, as a
    permission-denied directory would.
    """

    def __init__(
            self,
            paths: Iterable[str],
            convention: PathConvention = POSIX,
            unreadable: Iterable[str] = (),
    ):
        self.convention = convention
        self.dirs: Dict[str, List[str]] = {}
        self.files: Set[str] = set()
        self.unreadable = set(unreadable)
        self.exists_calls: List[str] = []
        self.list_calls: List[str] = []
        for p in paths:
            self.add(p)

    def add(self, path: str) -> None:
        is_dir = path.endswith(("/", "\\"))
        canonical = self.convention.canonicalize(path)
        current, segments = self.convention.split_root(canonical)
        self.dirs.setdefault(current, [])

        parts = [s for s in segments if s]
        for i, name in enumerate(parts):
            child = self.convention.join(current, name)
            if name not in self.dirs[current]:
                self.dirs[current].append(name)
            if i == len(parts) - 1 and not is_dir:
                self.files.add(child)
            else:
                self.dirs.setdefault(child, [])
            current = child

    def exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        canonical = self.convention.canonicalize(path)
        return canonical in self.files or canonical in self.dirs

    def list_dir(self, path: str):
        self.list_calls.append(path)
        if path in self.unreadable or path not in self.dirs:
            return None
        return tuple(self.dirs[path])


@pytest.fixture
def fake_fs() -> Callable[..., FakeFileSystem]:
    """Factory fixture building a FakeFileSystem from a list of paths."""
    def _build(paths: Iterable[str], **kwargs) -> FakeFileSystem:
        return FakeFileSystem(paths, **kwargs)
    return _build


# -----------------------------------------------------------------------------
# Host Filesystem Capabilities
# -----------------------------------------------------------------------------
@pytest.fixture
def case_sensitive_tmp(tmp_path: Path) -> Path:
    """
    Return tmp_path, skipping the test when the host filesystem ignores case.
    """
    marker = tmp_path / "CaseMarker"
    marker.write_text("x", encoding="utf-8")
    folded = tmp_path / "casemarker"
    is_insensitive = folded.exists()
    marker.unlink()
    if is_insensitive:
        pytest.skip("Host filesystem is case-insensitive.")
    return tmp_path
