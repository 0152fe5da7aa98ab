from __future__ import annotations

"""
detect-file: resolve a filesystem path if it exists, optionally ignoring case.
"""

from .core.matching import is_match
from .core.resolver import (
    ResolveOptions,
    Resolver,
    detect,
    detect_detailed,
    resolve,
)
from .domain.conventions import POSIX, WINDOWS, PathConvention, get_convention
from .domain.models import DirectoryProbe, MatchKind, ResolveResult

__version__ = "1.0.0"

__all__ = [
    "DirectoryProbe",
    "MatchKind",
    "POSIX",
    "PathConvention",
    "ResolveOptions",
    "ResolveResult",
    "Resolver",
    "WINDOWS",
    "detect",
    "detect_detailed",
    "get_convention",
    "is_match",
    "resolve",
]
