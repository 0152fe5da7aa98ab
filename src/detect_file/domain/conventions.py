from __future__ import annotations

"""
Path Convention Definitions.

Bundles the separator rules and path arithmetic of a platform family so the
resolver can run against either convention regardless of the host OS.
"""

import ntpath
import os
import posixpath
import re
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, List, Tuple

# -----------------------------------------------------------------------------
# CONVENTION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathConvention:
    """
    Platform path rules.

    Attributes:
        name: Identifier ('posix' or 'windows').
        pathmod: Path arithmetic module (posixpath / ntpath).
        separator: Canonical separator used when rebuilding roots.
        split_pattern: Regex splitting a canonical path into segments.
    """
    name: str
    pathmod: ModuleType
    separator: str
    split_pattern: re.Pattern

    def canonicalize(self, path: str) -> str:
        """Absolute, normalized form. Symlinks are left untouched."""
        return self.pathmod.abspath(path)

    def split(self, path: str) -> List[str]:
        return self.split_pattern.split(path)

    def split_root(self, path: str) -> Tuple[str, List[str]]:
        """
        Separate the root directory from the segments below it.

        The root is '/' on POSIX, a drive root ('C:\\') or a UNC share
        root ('\\\\server\\share\\') on Windows.
        """
        drive, tail = self.pathmod.splitdrive(path)
        segments = self.split(tail)
        return drive + self.separator, segments[1:]

    def join(self, *parts: str) -> str:
        return self.pathmod.join(*parts)

    def dirname(self, path: str) -> str:
        return self.pathmod.dirname(path)


POSIX = PathConvention(
    name="posix",
    pathmod=posixpath,
    separator="/",
    split_pattern=re.compile(r"/+"),
)

WINDOWS = PathConvention(
    name="windows",
    pathmod=ntpath,
    separator="\\",
    split_pattern=re.compile(r"[/\\]"),
)

CONVENTIONS: Dict[str, PathConvention] = {
    "posix": POSIX,
    "windows": WINDOWS,
}

CONVENTION_CHOICES = ("auto", "posix", "windows")

# -----------------------------------------------------------------------------
# LOOKUP API
# -----------------------------------------------------------------------------

def detect_convention() -> PathConvention:
    """Return the convention matching the host OS."""
    return WINDOWS if os.name == "nt" else POSIX


def get_convention(name: str) -> PathConvention:
    """
    Look up a convention by name.

    Args:
        name: 'auto', 'posix' or 'windows' (case-insensitive).

    Returns:
        PathConvention: The requested convention.

    Raises:
        ValueError: If the name is unknown.
    """
    key = (name or "").strip().lower()
    if key == "auto":
        return detect_convention()
    if key not in CONVENTIONS:
        raise ValueError(
            f"Unknown path convention '{name}'. Expected one of: {', '.join(CONVENTION_CHOICES)}."
        )
    return CONVENTIONS[key]
