from __future__ import annotations

"""
Tree Listing Line Classifier.

Assigns a semantic role and a nesting depth to a single input line under
the active dialect. Classification never aborts the parse except for the
odd-indentation condition of the plain dialect.
"""

from typing import Optional, Tuple

from maketree.core.parsing.format_detector import is_noise_line
from maketree.domain.constants import (
    CELL_WIDTH,
    DIRECTORY_MARKERS,
    FILE_TYPE_MARKERS,
    INDENT_CELLS,
    NBSP,
    NUL,
    PATH_SEPARATOR,
    PLAIN_INDENT_WIDTH,
    RESERVED_NAMES,
    SYMLINK_ARROW,
    TREE_CONNECTORS,
)
from maketree.domain.errors import InvalidIndentation
from maketree.domain.tree_models import ClassifiedLine, Dialect, LineKind, SourceLine

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_line(line: SourceLine, dialect: Dialect) -> ClassifiedLine:
    """
    Classify one source line.

    Args:
        line: The raw line.
        dialect: Dialect selected for the whole input.

    Returns:
        ClassifiedLine: Entry (DIRECTORY/FILE) with depth and clean name,
        or a BLANK/UNRECOGNIZED marker.

    Raises:
        InvalidIndentation: Plain dialect line with an odd leading-space count.
    """
    text = line.text.replace(NBSP, " ").rstrip()
    if is_noise_line(text):
        return ClassifiedLine(kind=LineKind.BLANK, number=line.number)

    if dialect is Dialect.TREE:
        return _classify_tree_line(text, line.number)
    return _classify_plain_line(text, line.number)

# -----------------------------------------------------------------------------
# DIALECT GRAMMARS
# -----------------------------------------------------------------------------

def _classify_tree_line(text: str, number: int) -> ClassifiedLine:
    """Box-drawing grammar: indentation cells, one connector, then the name."""
    found = _find_connector(text)
    if found is None:
        return _unrecognized(number)

    pos, connector = found
    prefix = text[:pos]
    if len(prefix) % CELL_WIDTH:
        return _unrecognized(number)

    cells = [prefix[i:i + CELL_WIDTH] for i in range(0, len(prefix), CELL_WIDTH)]
    if any(cell not in INDENT_CELLS for cell in cells):
        return _unrecognized(number)

    raw_name = text[pos + len(connector):].strip()
    if SYMLINK_ARROW in raw_name:
        raw_name = raw_name.split(SYMLINK_ARROW, 1)[0].rstrip()

    return _entry(raw_name, len(cells), number, strip_type_markers=True)


def _classify_plain_line(text: str, number: int) -> ClassifiedLine:
    """
    Plain grammar: two spaces per level, trailing separator marks a directory.

    A name may also be a relative path (`src/main.rs`), as in flat file
    lists; the builder creates its intermediate directories.
    """
    body = text.lstrip(" ")
    spaces = len(text) - len(body)

    # Tabs and other whitespace are not indentation in this dialect
    if body[:1].isspace():
        return _unrecognized(number)
    if spaces % PLAIN_INDENT_WIDTH:
        raise InvalidIndentation(number, spaces)

    return _entry(body, spaces // PLAIN_INDENT_WIDTH, number, strip_type_markers=False)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _find_connector(text: str) -> Optional[Tuple[int, str]]:
    """Locate the leftmost connector on the line."""
    best: Optional[Tuple[int, str]] = None
    for connector in TREE_CONNECTORS:
        pos = text.find(connector)
        if pos >= 0 and (best is None or pos < best[0]):
            best = (pos, connector)
    return best


def _entry(raw_name: str, depth: int, number: int, strip_type_markers: bool) -> ClassifiedLine:
    """Split markers off a raw name and build the entry line."""
    name = raw_name.strip()
    if name and name[-1] in DIRECTORY_MARKERS:
        name = name.rstrip(DIRECTORY_MARKERS)
        kind, marked = LineKind.DIRECTORY, True
    elif strip_type_markers and len(name) > 1 and name[-1] in FILE_TYPE_MARKERS:
        # `tree -F` type suffix: never part of the real name
        name = name[:-1]
        kind, marked = LineKind.FILE, True
    else:
        # A missing marker only proves "file" in the plain dialect
        kind, marked = LineKind.FILE, not strip_type_markers

    # Only the plain dialect carries relative paths
    segments = name.split(PATH_SEPARATOR) if not strip_type_markers else [name]
    if not all(_is_valid_name(segment) for segment in segments):
        return _unrecognized(number)
    return ClassifiedLine(kind=kind, depth=depth, name=name, number=number, marked=marked)


def _is_valid_name(name: str) -> bool:
    """A single path segment that cannot escape its parent."""
    if not name or name in RESERVED_NAMES or NUL in name:
        return False
    return not any(sep in name for sep in DIRECTORY_MARKERS)


def _unrecognized(number: int) -> ClassifiedLine:
    return ClassifiedLine(kind=LineKind.UNRECOGNIZED, number=number)
