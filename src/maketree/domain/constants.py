from __future__ import annotations

"""
Domain Constants.

Glyph tables and markers shared by the tree-listing parser and the
directory renderer.
"""

import re
from typing import Tuple

# Connectors emitted by `tree` (UTF-8 and --charset=ascii), with trailing space
TREE_CONNECTORS: Tuple[str, ...] = ("├── ", "└── ", "|-- ", "`-- ")
CONNECTOR_GLYPHS: Tuple[str, ...] = ("├──", "└──", "|--", "`--")

# Fixed-width indentation cells preceding a connector
INDENT_CELLS: Tuple[str, ...] = ("│   ", "|   ", "    ")
CELL_WIDTH = 4
PLAIN_INDENT_WIDTH = 2

DIRECTORY_MARKERS = "/\\"
FILE_TYPE_MARKERS = "*@|=>"
SYMLINK_ARROW = " -> "
RESERVED_NAMES: Tuple[str, ...] = (".", "..")

# Separator of relative paths in flat plain listings ("src/main.rs")
PATH_SEPARATOR = "/"
NUL = "\x00"

# Recent `tree` releases pad indentation cells with non-breaking spaces
NBSP = "\u00a0"
BOM = "\ufeff"

# Trailing report printed by `tree`: "3 directories, 2 files"
SUMMARY_LINE_RX = re.compile(r"^\d+ director(?:y|ies)(?:, \d+ files?)?$")
