from __future__ import annotations

"""
Tree Listing Parser.

Single entry point for the parsing subsystem: splits raw text into source
lines, selects the dialect, classifies every line and builds the tree.
No partial result is returned when a fatal parse condition is met.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from maketree.core.parsing.format_detector import detect_dialect
from maketree.core.parsing.line_classifier import classify_line
from maketree.core.parsing.tree_builder import build_tree
from maketree.domain.constants import BOM
from maketree.domain.errors import UnrecognizedFormat
from maketree.domain.tree_models import ClassifiedLine, Dialect, FileTree, LineKind, SourceLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedListing:
    """
    Outcome of a successful parse.

    Attributes:
        dialect: Dialect used for classification.
        tree: The complete node tree.
        skipped_lines: Unrecognized lines dropped from the input.
    """
    dialect: Dialect
    tree: FileTree
    skipped_lines: List[SourceLine] = field(default_factory=list)


def split_source_lines(text: str) -> List[SourceLine]:
    """Split raw input into numbered source lines."""
    if text.startswith(BOM):
        text = text[len(BOM):]
    return [SourceLine(text=raw, number=i) for i, raw in enumerate(text.splitlines(), start=1)]


def parse_tree_text(text: str, dialect: Optional[Dialect] = None) -> ParsedListing:
    """
    Parse a tree listing into a FileTree.

    Args:
        text: The whole input, already read.
        dialect: Explicit dialect override; detected when None.

    Returns:
        ParsedListing: Dialect, tree and the dropped unrecognized lines.

    Raises:
        UnrecognizedFormat: If no line is classifiable as an entry.
        InvalidIndentation: On an odd-indented plain dialect line.
        MalformedHierarchy: On a depth jump that skips a level.
    """
    lines = split_source_lines(text)
    if dialect is None:
        dialect = detect_dialect(lines)
    logger.debug(f"Parsing {len(lines)} lines using the {dialect.value} dialect.")

    entries: List[ClassifiedLine] = []
    skipped: List[SourceLine] = []
    # `tree DIR` prints the listed directory itself as the first line
    header_allowed = dialect is Dialect.TREE

    for line in lines:
        classified = classify_line(line, dialect)
        if classified.kind is LineKind.BLANK:
            continue
        if classified.kind is LineKind.UNRECOGNIZED and header_allowed:
            logger.debug(f"Ignoring listing header on line {line.number}: {line.text.strip()!r}")
            header_allowed = False
            continue
        header_allowed = False
        if classified.kind is LineKind.UNRECOGNIZED:
            logger.debug(f"Dropping unrecognized line {line.number}: {line.text!r}")
            skipped.append(line)
            continue
        entries.append(classified)

    if not entries:
        raise UnrecognizedFormat("input contains no tree entries", skipped_lines=skipped)

    tree = build_tree(entries)
    return ParsedListing(dialect=dialect, tree=tree, skipped_lines=skipped)
