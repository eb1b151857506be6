from __future__ import annotations

"""
Logging settings for the deployment tool.

The console stream carries the short progress lines a user sees while
modules are resolved and copied. The optional rotating file keeps the full
record, including logger names, for diagnosing a failed deployment.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging().

    Attributes:
        level: Level name ('DEBUG', 'info', 'Warn', ...). Unknown names mean INFO.
        console: Mirror records to stderr.
        log_file: Path of the rotating log file, if any.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings used by the command-line front end."""
        return cls(level="DEBUG" if debug else "INFO", log_file=log_file)

    @property
    def level_number(self) -> int:
        name = (self.level or "").strip().upper()
        if name == "WARN":
            name = "WARNING"
        value = logging.getLevelName(name)
        return value if isinstance(value, int) else logging.INFO

    def console_formatter(self) -> logging.Formatter:
        return logging.Formatter(CONSOLE_FORMAT)

    def file_formatter(self) -> logging.Formatter:
        return logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT)
