from __future__ import annotations

"""
Directory Probing Strategies.

Discovers the real on-disk casing around a target path. The quick probe reads
the target (or its parent) directly; the fuzzy walk rebuilds the real path one
segment at a time from the filesystem root when case-mismatched ancestors make
the quick probe impossible.
"""

import logging
from typing import List, Optional

from detect_file.core.matching import is_match
from detect_file.domain.conventions import PathConvention
from detect_file.domain.models import DirectoryProbe
from detect_file.infra.fs import FileSystem

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def try_readdir(
        filepath: str,
        fs: FileSystem,
        convention: PathConvention,
) -> Optional[DirectoryProbe]:
    """
    List the target as a directory, falling back to its parent directory.

    When neither can be read, defers to the fuzzy segment walk.

    Args:
        filepath: Canonical path of the target.
        fs: Filesystem collaborator.
        convention: Path rules used for dirname/join/split.

    Returns:
        Optional[DirectoryProbe]: The listing that succeeded, or None if no
                                  strategy could read an enclosing directory.
    """
    entries = fs.list_dir(filepath)
    if entries is not None:
        return DirectoryProbe(path=filepath, entries=entries)

    parent = convention.dirname(filepath)
    entries = fs.list_dir(parent)
    if entries is not None:
        return DirectoryProbe(path=parent, entries=entries)

    logger.debug(f"Quick probe failed for '{filepath}'. Starting fuzzy segment walk.")
    return fuzzy_walk(filepath, fs, convention)


def fuzzy_walk(
        filepath: str,
        fs: FileSystem,
        convention: PathConvention,
) -> Optional[DirectoryProbe]:
    """
    Reconstruct the real-cased directory chain from the root down.

    Each segment is matched case-insensitively against the listing of the
    directory confirmed so far; the first matching entry in listing order is
    appended. A segment with no match is skipped and the walk continues from
    the last confirmed directory.

    Example:
        With '/Users/me/Mixed/cAsEd/FooFile.js' on disk,
        fuzzy_walk('/users/me/mixed/cased/foofile.js', ...) returns
        DirectoryProbe('/Users/me/Mixed/cAsEd', ('FooFile.js',)).

    Args:
        filepath: Canonical path of the target.
        fs: Filesystem collaborator.
        convention: Path rules used for splitting and joining.

    Returns:
        Optional[DirectoryProbe]: Listing of the deepest confirmed directory,
                                  or None if any ancestor could not be listed.
    """
    root, segments = convention.split_root(filepath)
    confirmed: List[str] = [root]
    probe = DirectoryProbe(path=filepath)

    for segment in segments:
        current = convention.join(*confirmed)
        entries = fs.list_dir(current)
        if entries is None:
            logger.debug(f"Fuzzy walk aborted: '{current}' cannot be listed.")
            return None

        probe = DirectoryProbe(path=current, entries=entries)
        for name in entries:
            if is_match(name, segment):
                confirmed.append(name)
                break
        else:
            logger.debug(f"Fuzzy walk: no entry in '{current}' matches '{segment}'.")

    return probe
