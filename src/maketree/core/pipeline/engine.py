from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a reconstruction run end to end:
1. Parses the listing (no filesystem access).
2. Generates the pre-order action plan.
3. Executes or previews the plan under the policy.
4. Reports the summary.

Also hosts the inverse direction: representing an existing directory or
text file as text.
"""

import logging
import os
from dataclasses import replace
from typing import List, Optional

from maketree.core.analysis.content_classifier import ContentKind, classify_file
from maketree.core.analysis.tree_renderer import render_summary, render_tree
from maketree.core.analysis.tree_scanner import scan_directory
from maketree.core.execution.executor import execute_plan
from maketree.core.execution.reporter import Reporter
from maketree.core.parsing.parser import parse_tree_text
from maketree.core.planning.plan_generator import generate_plan
from maketree.domain.config import Policy
from maketree.domain.errors import ParseError, SnapshotError, UnrecognizedFormat
from maketree.domain.execution_models import (
    ExecutionResult,
    create_aborted_result,
    create_nothing_to_do_result,
)
from maketree.domain.tree_models import Dialect, FileTree, SourceLine
from maketree.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def dialect_from_choice(choice: Optional[str]) -> Optional[Dialect]:
    """Map a configuration choice ('auto', 'tree', 'plain') to an override."""
    if not choice or choice == "auto":
        return None
    return Dialect(choice)


def run_maketree(
        text: str,
        destination: str,
        policy: Policy,
        *,
        dialect: Optional[Dialect] = None,
        reporter: Optional[Reporter] = None,
) -> ExecutionResult:
    """
    Reconstruct the hierarchy described by a tree listing.

    Parse-time errors prevent any filesystem mutation. Execution-time
    errors stop the run but keep what was already applied.

    Args:
        text: The full listing text.
        destination: Destination root directory.
        policy: Dry-run/force/verbosity settings.
        dialect: Optional dialect override. Auto-detected when None.
        reporter: Sink for run output. Defaults to stdout.

    Returns:
        ExecutionResult: Final status and per-action outcomes.
    """
    reporter = reporter if reporter is not None else Reporter(verbosity=policy.verbosity)
    dest = normalize_path(destination, os.getcwd())
    logger.info(f"Reconstruction started for {dest} (dry_run={policy.dry_run}, force={policy.force})")

    # -------------------------------------------------------------------------
    # 1) Parse
    # -------------------------------------------------------------------------
    try:
        listing = parse_tree_text(text, dialect)
    except UnrecognizedFormat as e:
        logger.info(f"Nothing to do: {e}")
        _report_skipped_lines(reporter, e.skipped_lines)
        result = create_nothing_to_do_result(
            dest,
            dry_run=policy.dry_run,
            skipped_lines=[line.number for line in e.skipped_lines],
        )
        reporter.summary(result)
        return result
    except ParseError as e:
        logger.error(f"Parse failed: {e}")
        reporter.error(str(e))
        result = create_aborted_result(str(e), destination=dest, dry_run=policy.dry_run)
        reporter.summary(result)
        return result

    _report_skipped_lines(reporter, listing.skipped_lines)
    reporter.emit(2, f"Detected {listing.dialect.value} dialect, {len(listing.tree)} entries.")

    # -------------------------------------------------------------------------
    # 2) Plan & Execute
    # -------------------------------------------------------------------------
    plan = generate_plan(listing.tree, dest)
    result = execute_plan(plan, policy, reporter)

    if listing.skipped_lines:
        result = replace(result, skipped_lines=[line.number for line in listing.skipped_lines])

    reporter.summary(result)
    logger.info(f"Reconstruction finished with status {result.status.value}")
    return result


def snapshot_path(path: str, dialect: Dialect = Dialect.TREE) -> str:
    """
    Represent a directory or text file as text.

    A directory becomes a tree listing that run_maketree accepts back; a
    text file yields its contents unchanged, line endings included.

    Some names read back differently in the box dialect (a trailing `=` is
    a `tree -F` marker there). Such directories are written in the plain
    dialect instead.

    Args:
        path: Directory or file to represent.
        dialect: Preferred listing dialect for directories.

    Returns:
        str: The textual representation.

    Raises:
        SnapshotError: If the path is missing, a binary file, or holds names
            that no listing dialect can carry.
    """
    target = normalize_path(path, os.getcwd())

    if os.path.isdir(target):
        tree = scan_directory(target)
        fallback = Dialect.PLAIN if dialect is Dialect.TREE else Dialect.TREE
        for candidate in (dialect, fallback):
            text = _render_listing(tree, candidate)
            if _reads_back(text, candidate, tree):
                if candidate is not dialect:
                    logger.warning(f"Names under {target} need the {candidate.value} dialect.")
                return text
        raise SnapshotError(f"{target} holds names that cannot be written as a tree listing")

    if os.path.isfile(target):
        try:
            if classify_file(target) is ContentKind.BINARY:
                raise SnapshotError(f"{target} is a binary file and cannot be copied as text")
            with open(target, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            raise SnapshotError(f"Cannot read {target}: {e.strerror}") from e

    raise SnapshotError(f"{target} is neither a file nor a directory")

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _report_skipped_lines(reporter: Reporter, lines: List[SourceLine]) -> None:
    for line in lines:
        reporter.warning(f"line {line.number}: unrecognized entry ignored: {line.text.strip()!r}")


def _render_listing(tree: FileTree, dialect: Dialect) -> str:
    lines = render_tree(tree, dialect)
    if dialect is Dialect.TREE:
        lines = ["."] + lines + ["", render_summary(tree)]
    return "\n".join(lines) + "\n"


def _reads_back(text: str, dialect: Dialect, tree: FileTree) -> bool:
    """True when parsing the rendered listing yields the same structure."""
    try:
        listing = parse_tree_text(text, dialect)
    except UnrecognizedFormat:
        return len(tree) == 0
    except ParseError as e:
        logger.debug(f"Rendered {dialect.value} listing does not parse back: {e}")
        return False
    return not listing.skipped_lines and listing.tree.shape() == tree.shape()
