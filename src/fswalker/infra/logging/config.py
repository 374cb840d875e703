from __future__ import annotations

"""
Logging Configuration Models.

Settings consumed by configure_logging, plus the mapping from level
names to native logging constants.
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
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity captured by the root logger.
        console: Emit records to stderr. Stdout stays reserved for results.
        log_file: Optional path of a rotating diagnostic file.
        max_bytes: Size threshold before the file rolls over.
        backup_count: Number of rolled-over files kept.
        console_fmt: Format of terminal lines.
        file_fmt: Format of file lines.
        datefmt: Timestamp format used in the file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
