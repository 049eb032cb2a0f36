from __future__ import annotations

"""
Log Sinks.

Builds the stderr and rotating-file handlers that sit behind the queue,
and marks every handler maketree installs so that teardown never removes
handlers owned by a host application or by pytest.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from maketree.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_maketree_handler"


def mark_owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_owned(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sinks(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the handlers requested by a config.

    A log file that cannot be opened is reported on stderr and left out;
    diagnostics must never stop a reconstruction run.
    """
    level = cfg.level_number
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        sinks.append(console)

    if cfg.log_file:
        rotating = _open_log_file(cfg)
        if rotating is not None:
            rotating.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
            sinks.append(rotating)

    for sink in sinks:
        sink.setLevel(level)
        mark_owned(sink)
    return sinks


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    path = os.path.abspath(cfg.log_file or "")
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"maketree: cannot open log file '{path}': {e.strerror or e}\n")
        return None
