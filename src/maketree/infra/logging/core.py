from __future__ import annotations

"""
Logging Lifecycle.

One QueueHandler on the root logger feeds a QueueListener thread that owns
the real sinks, so stderr/file writes happen off the main thread and never
interleave with the report on stdout. The listener and a configured flag
are stored on the root logger itself; configure is idempotent and
shutdown_logging restores a clean root for the next in-process run.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from maketree.infra.logging.config import LoggingConfig
from maketree.infra.logging.handlers import build_sinks, is_owned, mark_owned

_CONFIGURED_FLAG_ATTR: str = "_maketree_configured"
_QUEUE_LISTENER_ATTR: str = "_maketree_queue_listener"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route root logger records through a queue to the configured sinks.

    Args:
        cfg: Level and sinks to install.
        force: Replace an existing configuration instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _teardown(root)
    root.setLevel(cfg.level_number)

    sinks = build_sinks(cfg)
    if not sinks:
        return root

    records: queue.Queue = queue.Queue(-1)
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()
    root.addHandler(mark_owned(QueueHandler(records)))

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    atexit.register(_drain, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flush pending records, close the sinks and detach from the root."""
    root = logging.getLogger()
    _teardown(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def _teardown(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _drain(listener)
        for sink in listener.handlers:
            sink.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in [h for h in root.handlers if is_owned(h)]:
        root.removeHandler(handler)
        handler.close()


def _drain(listener: Optional[QueueListener]) -> None:
    # stop() clears _thread, which makes the atexit call a no-op after shutdown
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
