from __future__ import annotations

"""
Tree Listing Format Detector.

Decides once per input which indentation dialect is in use before any
line-by-line classification happens.
"""

import logging
from typing import Sequence

from maketree.domain.constants import CONNECTOR_GLYPHS, NBSP, SUMMARY_LINE_RX
from maketree.domain.errors import UnrecognizedFormat
from maketree.domain.tree_models import Dialect, SourceLine

logger = logging.getLogger(__name__)


def detect_dialect(lines: Sequence[SourceLine]) -> Dialect:
    """
    Pick the dialect of a tree listing.

    The first line carrying a connector glyph selects the box-drawing
    dialect; otherwise the plain two-space dialect is assumed.

    Args:
        lines: Every line of the input, in order.

    Returns:
        Dialect: TREE or PLAIN.

    Raises:
        UnrecognizedFormat: If the input is empty or holds only noise.
    """
    has_content = False
    for line in lines:
        if any(glyph in line.text for glyph in CONNECTOR_GLYPHS):
            logger.debug(f"Box-drawing connector found on line {line.number}.")
            return Dialect.TREE
        if not has_content and not is_noise_line(line.text):
            has_content = True

    if not has_content:
        raise UnrecognizedFormat("input contains no tree entries")
    return Dialect.PLAIN


def is_noise_line(text: str) -> bool:
    """
    True for lines that carry no entry: blanks, the `.` root line printed by
    `tree`, and its trailing directory/file count summary.
    """
    s = text.replace(NBSP, " ").strip()
    return not s or s == "." or bool(SUMMARY_LINE_RX.match(s))
