from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from maketree.domain.config import DIALECT_CHOICES

_EPILOG = """\
Input can be output from `tree` (with or without -F) or a plain list
indented by two spaces per level where directory names end with '/'.

examples:
  tree -F myproj | maketree newproj
  maketree --file structure.tree --dry-run -v
  maketree --snapshot myproj --to-clipboard
"""

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the maketree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="maketree",
        description="Read a tree-like listing and create the directories and files it describes.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Destination and Input ---
    p.add_argument(
        "destination",
        nargs="?",
        default=".",
        help="Directory in which the structure is created (default: current directory).",
    )
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "-i", "--file",
        dest="input_file",
        default=None,
        help="Read the listing from FILE instead of stdin.",
    )
    source.add_argument(
        "--from-clipboard",
        action="store_true",
        help="Read the listing from the system clipboard.",
    )
    source.add_argument(
        "--snapshot",
        metavar="PATH",
        default=None,
        help="Print a directory as a tree listing (or a text file's contents) instead of creating anything.",
    )

    # --- Runtime Policy ---
    p.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help="Print actions without making changes.",
    )
    p.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing files instead of skipping them.",
    )
    p.add_argument(
        "-v", "--verbose",
        dest="verbosity",
        action="count",
        default=None,
        help="Increase verbosity (repeat up to -vvv).",
    )
    p.add_argument(
        "--dialect",
        choices=DIALECT_CHOICES,
        default=None,
        help="Force the listing dialect instead of detecting it.",
    )

    # --- Snapshot Output ---
    p.add_argument(
        "--plain",
        action="store_true",
        help="With --snapshot, render two-space indentation instead of tree glyphs.",
    )
    p.add_argument(
        "--to-clipboard",
        action="store_true",
        help="With --snapshot, copy the result to the clipboard instead of printing it.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        help="Also write diagnostic logs to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags left at their defaults are omitted so persisted values apply.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.dry_run:
        overrides["dry_run"] = True
    if args.force:
        overrides["force"] = True
    if args.verbosity is not None:
        overrides["verbosity"] = args.verbosity
    if args.dialect is not None:
        overrides["dialect"] = args.dialect

    return overrides
