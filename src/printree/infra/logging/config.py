from __future__ import annotations

"""
Logging Configuration Models.

Settings consumed by configure_logging. The CLI builds them from its
`--debug` and `--log-file` flags; library code never does.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for a printree process.

    Attributes:
        level: Level name; unknown names resolve to WARNING so that stdout
            tree output is never interleaved with chatter.
        console: Mirror records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Rollover threshold of the log file.
        backup_count: Rotated files to keep.
        console_fmt: Format for stderr records.
        file_fmt: Format for file records.
        datefmt: Timestamp format for file records.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings used by the command line: WARNING, or DEBUG with --debug."""
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=log_file)

    @property
    def level_int(self) -> int:
        """Numeric logging level for `level`."""
        if not self.level:
            return logging.WARNING
        return _LEVEL_MAP.get(str(self.level).strip().upper(), logging.WARNING)
