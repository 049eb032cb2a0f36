from __future__ import annotations

"""
FileSystem Infrastructure Layer.

The only module that touches the disk on behalf of the executor. Entry
probes are expressed as kinds ("directory", "file", or nothing) so the
executor can compare what a plan expects with what a path holds.
"""

import os
from typing import Optional

APP_DIR_NAME = "Maketree"
UNIX_APP_DIR_NAME = ".maketree"

KIND_DIRECTORY = "directory"
KIND_FILE = "file"

# -----------------------------------------------------------------------------
# PATHS
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Locate the per-user settings directory.

    %LOCALAPPDATA%/Maketree (or %APPDATA%) on Windows, ~/.maketree elsewhere.
    The directory is not created; callers that only read from it treat a
    missing directory like a missing file.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, APP_DIR_NAME))
    return os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Resolve a user-supplied path to an absolute one.

    `~` and environment variables are expanded; blank input means fallback.
    """
    raw = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(raw)))

# -----------------------------------------------------------------------------
# PROBES AND MUTATIONS
# -----------------------------------------------------------------------------

def entry_kind(path: str) -> Optional[str]:
    """
    Report what currently occupies a path.

    Symlinks are followed for the directory test. Anything else that exists,
    dangling links included, counts as a file.

    Returns:
        Optional[str]: KIND_DIRECTORY, KIND_FILE, or None when the path is free.
    """
    if os.path.isdir(path):
        return KIND_DIRECTORY
    return KIND_FILE if os.path.lexists(path) else None


def make_directory(path: str) -> None:
    """Create exactly one directory level; raises OSError if the parent is missing."""
    os.mkdir(path)


def write_file(path: str, content: bytes = b"") -> None:
    """Create or truncate a file with the given body; raises OSError on failure."""
    with open(path, "wb") as f:
        f.write(content)
