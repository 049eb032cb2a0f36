from __future__ import annotations

"""
Domain Error Taxonomy.

Parse-time errors stop a run before any filesystem mutation happens.
Execution-time errors stop forward progress but keep the effects that
were already applied.
"""

from typing import List, Optional

from maketree.domain.tree_models import SourceLine


class MaketreeError(Exception):
    """Base class for every condition raised by the reconstruction core."""


class UnrecognizedFormat(MaketreeError):
    """
    The input holds no parseable entries. Callers treat it as nothing to do.

    Lines that looked like content but did not classify travel with the
    error so they can still be reported.
    """

    def __init__(self, message: str, skipped_lines: Optional[List[SourceLine]] = None) -> None:
        super().__init__(message)
        self.skipped_lines: List[SourceLine] = list(skipped_lines or [])


class ClipboardUnavailable(MaketreeError):
    """The system clipboard could not be read or written."""

# -----------------------------------------------------------------------------
# PARSE ERRORS
# -----------------------------------------------------------------------------

class ParseError(MaketreeError):
    """A fatal parse condition tied to a specific input line."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
        self.detail = message


class InvalidIndentation(ParseError):
    """Plain dialect line indented by an odd number of spaces."""

    def __init__(self, line_number: int, spaces: int) -> None:
        super().__init__(line_number, f"odd indentation ({spaces} leading spaces)")
        self.spaces = spaces


class MalformedHierarchy(ParseError):
    """A line nests more than one level below the currently open directory."""

# -----------------------------------------------------------------------------
# EXECUTION ERRORS
# -----------------------------------------------------------------------------

class ExecutionError(MaketreeError):
    """A fatal condition raised while applying a plan."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class ConflictingKind(ExecutionError):
    """The target path already exists as the other kind of entry."""

    def __init__(self, path: str, expected: str, found: str) -> None:
        super().__init__(path, f"{found} exists where {expected} expected: {path}")
        self.expected = expected
        self.found = found


class FilesystemFailure(ExecutionError):
    """An OS-level error, or a path the OS refuses outright, while mutating the destination."""

    def __init__(self, path: str, cause: Optional[Exception]) -> None:
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(path, f"filesystem error at {path}: {reason}")
        self.cause = cause


class SnapshotError(MaketreeError):
    """A path cannot be represented as text (binary file, missing entry)."""
