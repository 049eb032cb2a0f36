from __future__ import annotations

"""
Execution Domain Data Models.

Defines the state machine, per-action outcomes and the unified result
object exchanged between the reconstruction engine and interface layers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from maketree.domain.plan_models import Action

# -----------------------------------------------------------------------------
# STATE DEFINITIONS
# -----------------------------------------------------------------------------

class ExecutorState(Enum):
    """Lifecycle of a single executor invocation."""
    IDLE = "IDLE"
    PLANNING = "PLANNING"
    EXECUTING = "EXECUTING"
    COMPLETED = "COMPLETED"
    ABORTED = "ABORTED"


class ExecutionStatus(Enum):
    """Final status reported to the caller."""
    COMPLETED = "completed"
    COMPLETED_WITH_SKIPS = "completed_with_skips"
    ABORTED = "aborted"
    NOTHING_TO_DO = "nothing_to_do"


OUTCOME_PLANNED = "planned"
OUTCOME_CREATED = "created"
OUTCOME_OVERWRITTEN = "overwritten"
OUTCOME_SKIPPED = "skipped"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ActionOutcome:
    """
    Result of applying (or previewing) one action.

    Attributes:
        action: The plan entry.
        path: Absolute filesystem path of the target.
        status: One of planned/created/overwritten/skipped.
    """
    action: Action
    path: str
    status: str


@dataclass(frozen=True)
class ExecutionResult:
    """
    Unified result of a reconstruction run.

    Attributes:
        status: Final status of the run.
        error: Descriptive message when aborted.
        last_path: Path of the action that aborted the run.
        destination: Absolute destination root.
        dry_run: Whether the run was a preview.
        outcomes: Outcomes of every action that completed.
        skipped_lines: Line numbers dropped as unrecognized during parsing.
    """
    status: ExecutionStatus
    error: str = ""
    last_path: str = ""
    destination: str = ""
    dry_run: bool = False
    outcomes: List[ActionOutcome] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is not ExecutionStatus.ABORTED

    def count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def created(self) -> int:
        return self.count(OUTCOME_CREATED)

    @property
    def overwritten(self) -> int:
        return self.count(OUTCOME_OVERWRITTEN)

    @property
    def skipped(self) -> int:
        return self.count(OUTCOME_SKIPPED)

    @property
    def planned(self) -> int:
        return self.count(OUTCOME_PLANNED)

    @property
    def failed(self) -> int:
        return 1 if self.status is ExecutionStatus.ABORTED and self.last_path else 0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation for the CLI."""
        return {
            "status": self.status.value,
            "error": self.error,
            "last_path": self.last_path,
            "destination": self.destination,
            "dry_run": self.dry_run,
            "created": self.created,
            "overwritten": self.overwritten,
            "skipped": self.skipped,
            "planned": self.planned,
            "failed": self.failed,
            "skipped_lines": list(self.skipped_lines),
            "actions": [
                {"path": o.action.rel_path, "kind": o.action.kind.value, "status": o.status}
                for o in self.outcomes
            ],
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_finished_result(
        destination: str,
        outcomes: List[ActionOutcome],
        dry_run: bool = False,
        skipped_lines: Optional[List[int]] = None,
) -> ExecutionResult:
    """
    Create the result of a run that applied (or previewed) every action.

    The status is COMPLETED_WITH_SKIPS when at least one action was skipped.
    """
    has_skips = any(o.status == OUTCOME_SKIPPED for o in outcomes)
    status = ExecutionStatus.COMPLETED_WITH_SKIPS if has_skips else ExecutionStatus.COMPLETED
    return ExecutionResult(
        status=status,
        destination=destination,
        dry_run=dry_run,
        outcomes=list(outcomes),
        skipped_lines=list(skipped_lines or []),
    )


def create_aborted_result(
        error: str,
        destination: str = "",
        last_path: str = "",
        outcomes: Optional[List[ActionOutcome]] = None,
        dry_run: bool = False,
        skipped_lines: Optional[List[int]] = None,
) -> ExecutionResult:
    """
    Create the result of a run stopped by a fatal condition.

    Outcomes already applied are kept: aborted runs are not rolled back.
    """
    return ExecutionResult(
        status=ExecutionStatus.ABORTED,
        error=error,
        last_path=last_path,
        destination=destination,
        dry_run=dry_run,
        outcomes=list(outcomes or []),
        skipped_lines=list(skipped_lines or []),
    )


def create_nothing_to_do_result(
        destination: str = "",
        dry_run: bool = False,
        skipped_lines: Optional[List[int]] = None,
) -> ExecutionResult:
    """Create the result of a run whose input held no entries."""
    return ExecutionResult(
        status=ExecutionStatus.NOTHING_TO_DO,
        destination=destination,
        dry_run=dry_run,
        skipped_lines=list(skipped_lines or []),
    )
