from __future__ import annotations

"""
maketree console entry point.

Works both as the installed `maketree` script and as
`python src/maketree/main.py` from a checkout. Any exception that escapes
the CLI controller is logged with its traceback and exits with status 1
instead of ending in a bare interpreter dump.
"""

import logging
import os
import sys
import traceback
from types import TracebackType
from typing import Optional, Type

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_SRC_DIR = os.path.dirname(_PACKAGE_DIR)
if not getattr(sys, "frozen", False) and _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)


def global_exception_handler(
        exctype: Type[BaseException],
        value: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """Last-resort hook: record the crash, tell the user, exit 1."""
    details = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("maketree.supervisor").critical(f"Unhandled {exctype.__name__}: {value}\n{details}")

    sys.stderr.write(f"maketree: internal error: {exctype.__name__}: {value}\n")
    sys.stderr.write(details)
    sys.exit(1)


def main() -> int:
    sys.excepthook = global_exception_handler
    from maketree.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
