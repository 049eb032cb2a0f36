from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared listing fixtures in both dialects.
"""

import io
import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def tree_listing() -> str:
    """
    Output of `tree -F` for a small project.

    Layout:
        src/ (main.py, utils/helpers.py), README.md, run.sh (executable)
    """
    return (
        ".\n"
        "├── src/\n"
        "│   ├── main.py\n"
        "│   └── utils/\n"
        "│       └── helpers.py\n"
        "├── README.md\n"
        "└── run.sh*\n"
        "\n"
        "2 directories, 4 files\n"
    )


@pytest.fixture
def plain_listing() -> str:
    """The same project written in the two-space dialect."""
    return (
        "src/\n"
        "  main.py\n"
        "  utils/\n"
        "    helpers.py\n"
        "README.md\n"
        "run.sh\n"
    )


@pytest.fixture
def report_stream() -> io.StringIO:
    """In-memory sink for Reporter output."""
    return io.StringIO()
