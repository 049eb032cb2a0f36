from __future__ import annotations

"""
Clipboard Infrastructure.

Thin adapter over pyperclip. Platform mechanics (pbcopy, xclip, win32)
are entirely pyperclip's concern; this module only normalizes its
failures into the domain error taxonomy.
"""

import logging

import pyperclip

from maketree.domain.errors import ClipboardUnavailable

logger = logging.getLogger(__name__)


def read_clipboard_text() -> str:
    """
    Return the current clipboard text.

    Raises:
        ClipboardUnavailable: If no clipboard mechanism is usable.
    """
    try:
        text = pyperclip.paste() or ""
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailable(f"Cannot read clipboard: {e}") from e
    logger.debug(f"Read {len(text)} characters from clipboard.")
    return text


def copy_text_to_clipboard(text: str) -> None:
    """
    Replace the clipboard content with text.

    Raises:
        ClipboardUnavailable: If no clipboard mechanism is usable.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailable(f"Cannot write clipboard: {e}") from e
    logger.debug(f"Copied {len(text)} characters to clipboard.")
