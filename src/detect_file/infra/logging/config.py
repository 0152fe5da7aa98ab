from __future__ import annotations

"""
Logging Settings for the detect-file CLI.

The library never configures logging itself; these settings describe what
the command line front end installs: a stderr console and, on request, a
rotating diagnostics file.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Diagnostics files stay small; resolution logs are a few lines per path
LOG_FILE_MAX_BYTES = 256 * 1024
LOG_FILE_BACKUPS = 1


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging setup requested by one CLI invocation.

    Attributes:
        level: Level name from LOG_LEVELS; unknown names mean INFO.
        console: Write records to stderr.
        log_file: Optional diagnostics file (rotated).
        max_bytes: Rollover threshold of the diagnostics file.
        backup_count: Rotated files kept next to it.
    """
    level: str = DEFAULT_LOG_LEVEL
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = LOG_FILE_MAX_BYTES
    backup_count: int = LOG_FILE_BACKUPS

    @property
    def level_int(self) -> int:
        name = (self.level or "").strip().upper()
        if name not in LOG_LEVELS:
            name = DEFAULT_LOG_LEVEL
        return getattr(logging, name)

    @classmethod
    def for_cli(cls, log_level: str, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """
        Build the settings for a CLI run.

        Args:
            log_level: Validated 'log_level' from the configuration.
            debug: The --debug flag, which wins over the configured level.
            log_file: The --log-file argument.

        Returns:
            LoggingConfig: Console logging plus the optional file.
        """
        return cls(level="DEBUG" if debug else log_level, log_file=log_file)
