from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: loading and merging of configuration
sources (defaults, persistent storage, and CLI overrides), logging
initialization, input acquisition, reconstruction, and result rendering.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from maketree.core.execution.reporter import Reporter
from maketree.core.pipeline.engine import dialect_from_choice, run_maketree, snapshot_path
from maketree.core.pipeline.validator import validate_config
from maketree.domain.config import get_default_config, load_config, policy_from_config
from maketree.domain.errors import ClipboardUnavailable, SnapshotError
from maketree.domain.execution_models import ExecutionResult, ExecutionStatus
from maketree.domain.tree_models import Dialect
from maketree.infra.clipboard import copy_text_to_clipboard, read_clipboard_text
from maketree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    level_for_verbosity,
    shutdown_logging,
)
from maketree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 aborted run, 2 bad input).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration hierarchy (defaults, persisted file, flags)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional file)
    level = level_for_verbosity(clean_conf["verbosity"], debug=args.debug)
    configure_logging(LoggingConfig(level=level, console=True, log_file=args.log_file))

    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if args.dump_config:
            print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
            return EXIT_OK

        if args.snapshot:
            return _run_snapshot(args.snapshot, plain=args.plain, to_clipboard=args.to_clipboard)

        return _run_reconstruction(args, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_reconstruction(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    """Read the listing, run the engine and render the result."""
    try:
        text = _read_input(args.input_file, args.from_clipboard)
    except (OSError, UnicodeDecodeError, ClipboardUnavailable) as e:
        logger.error(f"Cannot read input: {e}")
        print(f"ERROR: Cannot read input: {e}", file=sys.stderr)
        return EXIT_USAGE

    policy = policy_from_config(conf)
    # Keep stdout clean for the JSON document
    reporter = Reporter(
        stream=sys.stderr if args.json_output else sys.stdout,
        verbosity=policy.verbosity,
    )

    result = run_maketree(
        text,
        args.destination,
        policy,
        dialect=dialect_from_choice(conf["dialect"]),
        reporter=reporter,
    )

    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))

    return _exit_code(result)


def _run_snapshot(path: str, plain: bool, to_clipboard: bool) -> int:
    """Represent a directory or text file as text, on stdout or the clipboard."""
    dialect = Dialect.PLAIN if plain else Dialect.TREE
    try:
        text = snapshot_path(path, dialect)
        if to_clipboard:
            copy_text_to_clipboard(text)
            print(f"Copied {path} to clipboard", file=sys.stderr)
        else:
            sys.stdout.write(text)
    except (SnapshotError, ClipboardUnavailable) as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _read_input(input_file: Optional[str], from_clipboard: bool) -> str:
    """Consume the whole listing from a file, the clipboard or stdin."""
    if input_file:
        logger.debug(f"Reading listing from {input_file}")
        with open(input_file, "r", encoding="utf-8") as f:
            return f.read()
    if from_clipboard:
        return read_clipboard_text()
    logger.debug("Reading listing from stdin")
    return sys.stdin.read()


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged.
    """
    out = dict(base)
    for k in ("dry_run", "force", "verbosity", "dialect"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _exit_code(result: ExecutionResult) -> int:
    """Map a run result to a process exit code."""
    if result.status is not ExecutionStatus.ABORTED:
        return EXIT_OK
    # Aborted before any target was touched: the listing itself was bad
    return EXIT_ABORTED if result.last_path else EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
