from __future__ import annotations

from .config import LoggingConfig, level_for_verbosity
from .core import configure_logging, get_logger, shutdown_logging

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "level_for_verbosity",
    "shutdown_logging",
]
