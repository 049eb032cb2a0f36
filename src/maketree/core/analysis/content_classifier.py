from __future__ import annotations

"""
File Content Classifier.

Decides whether a file can be carried as text. The verdict is the only
thing the rest of the system consumes.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ContentKind(Enum):
    TEXT = "text"
    BINARY = "binary"


def classify_bytes(data: bytes) -> ContentKind:
    """NUL bytes or invalid UTF-8 mean binary."""
    if b"\x00" in data:
        return ContentKind.BINARY
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return ContentKind.BINARY
    return ContentKind.TEXT


def classify_file(path: str) -> ContentKind:
    """
    Classify a file by its full content.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "rb") as f:
        data = f.read()
    kind = classify_bytes(data)
    logger.debug(f"{path}: {kind.value} ({len(data)} bytes)")
    return kind
