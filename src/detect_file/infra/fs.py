from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the read-only filesystem queries consumed by the resolver and the
user data directory used for persistent configuration and diagnostics. Acts
as the single boundary where OS-level errors are translated into plain result
values, so the resolution stages never see an exception for an ordinary
missing or unreadable directory.
"""

import logging
import os
from typing import Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DetectFile"
UNIX_APP_DIR_NAME = ".detect_file"

# -----------------------------------------------------------------------------
# FILESYSTEM QUERY API
# -----------------------------------------------------------------------------

class FileSystem(Protocol):
    """Read-only filesystem queries required by the resolver."""

    def exists(self, path: str) -> bool:
        ...

    def list_dir(self, path: str) -> Optional[Tuple[str, ...]]:
        ...


class LocalFileSystem:
    """
    Host filesystem implementation backed by the 'os' module.

    Listing failures (missing directory, permission denied, not a directory,
    embedded NUL bytes) are reported as None instead of being raised.
    """

    def exists(self, path: str) -> bool:
        """
        Check whether a file or directory exists at the given path.

        Args:
            path: Path to check.

        Returns:
            bool: True if the path maps to any existing entry.
        """
        return os.path.exists(path)

    def list_dir(self, path: str) -> Optional[Tuple[str, ...]]:
        """
        List the entry names of a directory in filesystem order.

        Args:
            path: Directory to read.

        Returns:
            Optional[Tuple[str, ...]]: Entry names, or None if unreadable.
        """
        try:
            return tuple(os.listdir(path))
        except (OSError, ValueError) as e:
            logger.debug(f"Directory listing unavailable for '{path}': {e}")
            return None

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/DetectFile
    - Linux/Mac: ~/.detect_file

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Unable to create user data directory '{path}': {e}")

    return os.path.abspath(path)

