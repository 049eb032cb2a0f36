from __future__ import annotations

"""
Unit tests for the Line Classifier.

Verifies both dialect grammars: depth computation from indentation cells
or space pairs, marker handling, and the lines that must be rejected.
"""

import pytest

from maketree.core.parsing.line_classifier import classify_line
from maketree.domain.errors import InvalidIndentation
from maketree.domain.tree_models import ClassifiedLine, Dialect, LineKind, SourceLine


def _tree(text: str, number: int = 1) -> ClassifiedLine:
    return classify_line(SourceLine(text=text, number=number), Dialect.TREE)


def _plain(text: str, number: int = 1) -> ClassifiedLine:
    return classify_line(SourceLine(text=text, number=number), Dialect.PLAIN)

# -----------------------------------------------------------------------------
# TREE DIALECT
# -----------------------------------------------------------------------------

def test_tree_top_level_directory() -> None:
    """TC-01: Connector at column zero with a slash marker."""
    line = _tree("├── src/", number=2)
    assert line.kind is LineKind.DIRECTORY
    assert line.depth == 0
    assert line.name == "src"
    assert line.number == 2
    assert line.marked is True


def test_tree_nested_file_is_unmarked() -> None:
    """TC-02: A bare name in the box dialect is a file, but not a proven one."""
    line = _tree("│   └── main.py")
    assert line.kind is LineKind.FILE
    assert line.depth == 1
    assert line.name == "main.py"
    assert line.marked is False


@pytest.mark.parametrize("text,depth", [
    ("└── a", 0),
    ("│   ├── a", 1),
    ("    └── a", 1),
    ("│   │   └── a", 2),
    ("│       └── a", 2),
    ("            └── a", 3),
])
def test_tree_depth_counts_indentation_cells(text: str, depth: int) -> None:
    """TC-03: Depth equals the number of four-column cells before the connector."""
    line = _tree(text)
    assert line.is_entry
    assert line.depth == depth


def test_tree_ascii_charset() -> None:
    """TC-04: ASCII connectors and cells behave like the box-drawing ones."""
    assert _tree("|-- docs/").kind is LineKind.DIRECTORY
    line = _tree("|   `-- index.md")
    assert (line.kind, line.depth, line.name) == (LineKind.FILE, 1, "index.md")


def test_tree_non_breaking_spaces_are_normalized() -> None:
    """TC-05: NBSP padding inside indentation cells counts as spaces."""
    line = _tree("│   └── a.txt")
    assert line.depth == 1
    line = _tree("│\u00a0\u00a0 └── a.txt")
    assert line.depth == 1
    assert line.name == "a.txt"


@pytest.mark.parametrize("suffix", ["*", "@", "|", "=", ">"])
def test_tree_type_markers_are_stripped(suffix: str) -> None:
    """TC-06: `tree -F` type suffixes are not part of the name and prove a file."""
    line = _tree(f"└── run{suffix}")
    assert line.kind is LineKind.FILE
    assert line.name == "run"
    assert line.marked is True


def test_tree_symlink_target_is_dropped() -> None:
    """TC-07: Only the link name is kept from `name -> target`."""
    assert _tree("├── latest -> releases/v2").name == "latest"
    line = _tree("├── current@ -> ../shared")
    assert line.name == "current"
    assert line.marked is True


def test_tree_trailing_whitespace_is_ignored() -> None:
    """TC-08: Trailing spaces and CR do not leak into names."""
    assert _tree("└── notes.txt   \r").name == "notes.txt"


@pytest.mark.parametrize("text", [
    "myproject",
    "  └── misaligned",
    "xx  └── garbage prefix",
    "├── a/b.txt",
    "├── ..",
    "├──",
])
def test_tree_unrecognized_lines(text: str) -> None:
    """TC-09: Lines without a valid prefix, connector or name are unrecognized."""
    assert _tree(text).kind is LineKind.UNRECOGNIZED


@pytest.mark.parametrize("text", ["", "   ", ".", "4 directories, 9 files"])
def test_noise_lines_are_blank(text: str) -> None:
    """TC-10: Noise lines are classified BLANK in both dialects."""
    assert _tree(text).kind is LineKind.BLANK
    assert _plain(text).kind is LineKind.BLANK

# -----------------------------------------------------------------------------
# PLAIN DIALECT
# -----------------------------------------------------------------------------

def test_plain_directory_and_file() -> None:
    """TC-11: A trailing separator marks a directory; anything else is a file."""
    d = _plain("src/")
    f = _plain("  main.py")
    assert (d.kind, d.depth, d.name, d.marked) == (LineKind.DIRECTORY, 0, "src", True)
    assert (f.kind, f.depth, f.name, f.marked) == (LineKind.FILE, 1, "main.py", True)


def test_plain_backslash_marks_directory() -> None:
    """TC-12: Windows-style separator is accepted as a directory marker."""
    line = _plain("    build\\")
    assert line.kind is LineKind.DIRECTORY
    assert line.depth == 2
    assert line.name == "build"


def test_plain_keeps_type_suffix_characters() -> None:
    """TC-13: Only the box dialect strips `-F` suffixes."""
    assert _plain("notes*").name == "notes*"


def test_plain_odd_indentation_raises() -> None:
    """TC-14: An odd number of leading spaces is fatal and carries the line number."""
    with pytest.raises(InvalidIndentation) as exc:
        _plain("   odd.txt", number=7)
    assert exc.value.line_number == 7
    assert exc.value.spaces == 3
    assert "line 7" in str(exc.value)


@pytest.mark.parametrize("text", ["\tsrc/", "  ../", "/", "/etc/hosts", "a//b", "src/../x", "a\\b.txt"])
def test_plain_unrecognized_lines(text: str) -> None:
    """TC-15: Tabs, reserved names, absolute and escaping paths are rejected."""
    assert _plain(text).kind is LineKind.UNRECOGNIZED


def test_plain_relative_path_entries() -> None:
    """TC-16: Flat file lists keep the relative path and its segments."""
    f = _plain("src/bin/main.rs")
    d = _plain("  docs/api/")
    assert (f.kind, f.depth, f.segments) == (LineKind.FILE, 0, ("src", "bin", "main.rs"))
    assert (d.kind, d.depth, d.segments) == (LineKind.DIRECTORY, 1, ("docs", "api"))


@pytest.mark.parametrize("text", ["├── b\x00c", "│   └── nul\x00/"])
def test_tree_names_with_nul_are_unrecognized(text: str) -> None:
    """TC-17: No filesystem accepts an embedded NUL byte."""
    assert _tree(text).kind is LineKind.UNRECOGNIZED


def test_plain_names_with_nul_are_unrecognized() -> None:
    """TC-18: The NUL check applies to every path segment."""
    assert _plain("  b\x00c").kind is LineKind.UNRECOGNIZED
    assert _plain("src/b\x00c").kind is LineKind.UNRECOGNIZED
