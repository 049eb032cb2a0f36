from __future__ import annotations

"""
Reporting Sink.

Append-only text stream for human-facing run output. Per-action lines are
gated by verbosity; the final summary is always written.
"""

import sys
from typing import Optional, TextIO

from maketree.domain.execution_models import (
    OUTCOME_CREATED,
    OUTCOME_OVERWRITTEN,
    OUTCOME_PLANNED,
    OUTCOME_SKIPPED,
    ActionOutcome,
    ExecutionResult,
    ExecutionStatus,
)
from maketree.domain.plan_models import ActionKind

_TAGS = {
    (OUTCOME_PLANNED, ActionKind.MAKE_DIRECTORY): "[PLAN MKDIR]",
    (OUTCOME_PLANNED, ActionKind.WRITE_FILE): "[PLAN CREATE]",
    (OUTCOME_CREATED, ActionKind.MAKE_DIRECTORY): "[MKDIR]",
    (OUTCOME_CREATED, ActionKind.WRITE_FILE): "[CREATE]",
    (OUTCOME_OVERWRITTEN, ActionKind.MAKE_DIRECTORY): "[KEEP DIR]",
    (OUTCOME_OVERWRITTEN, ActionKind.WRITE_FILE): "[OVERWRITE]",
    (OUTCOME_SKIPPED, ActionKind.MAKE_DIRECTORY): "[SKIP DIR]",
    (OUTCOME_SKIPPED, ActionKind.WRITE_FILE): "[SKIP FILE]",
}


class Reporter:
    """
    Verbosity-gated writer over a text stream.

    Args:
        stream: Destination stream. Defaults to stdout.
        verbosity: 0 prints only the summary, 1 adds one line per action,
            2 and 3 add diagnostic detail.
    """

    def __init__(self, stream: Optional[TextIO] = None, verbosity: int = 0) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.verbosity = verbosity

    def emit(self, level: int, message: str) -> None:
        """Write a line if the verbosity allows it."""
        if self.verbosity >= level:
            self.stream.write(message + "\n")

    def action(self, outcome: ActionOutcome) -> None:
        tag = _TAGS[(outcome.status, outcome.action.kind)]
        self.emit(1, f"{tag:<14}{outcome.path}")

    def warning(self, message: str) -> None:
        self.emit(1, f"[WARNING] {message}")

    def error(self, message: str) -> None:
        """Errors are always written."""
        self.emit(0, f"[ERROR] {message}")

    def summary(self, result: ExecutionResult) -> None:
        """Write the final counts. Always printed regardless of verbosity."""
        if result.status is ExecutionStatus.NOTHING_TO_DO:
            self.emit(0, "Nothing to do: no tree entries found in input.")
            return

        line = (
            f"Created: {result.created}, overwritten: {result.overwritten}, "
            f"skipped: {result.skipped}, failed: {result.failed}"
        )
        if result.dry_run:
            line = f"Dry run: {result.planned} actions planned, nothing written. {line}"
        if result.status is ExecutionStatus.ABORTED:
            state = "partial" if result.outcomes else "no changes"
            line += f" (aborted, {state})"
        self.emit(0, line)
