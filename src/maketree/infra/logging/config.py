from __future__ import annotations

"""
Logging Settings.

Diagnostics are separate from the run report: the Reporter owns stdout,
while log records go to stderr and, optionally, a rotating file. This
module decides how loud those diagnostics are for a given run.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVELS: Dict[str, int] = {
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
    Diagnostic sinks for one process.

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        console: Mirror records on stderr.
        log_file: Rotating log file path, if any.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file.
        datefmt: Timestamp layout in the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "maketree: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_number(self) -> int:
        return LEVELS.get(str(self.level or "").strip().upper(), logging.WARNING)


def level_for_verbosity(verbosity: int, debug: bool = False) -> str:
    """
    Pick the diagnostic level for a run verbosity (0..3).

    Levels 0 and 1 only surface warnings, since the Reporter already prints
    one line per action at level 1. Level 2 adds INFO, level 3 or --debug
    adds DEBUG.
    """
    if debug or verbosity >= 3:
        return "DEBUG"
    return "INFO" if verbosity == 2 else "WARNING"
