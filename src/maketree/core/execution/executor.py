from __future__ import annotations

"""
Plan Executor.

Applies an ordered plan to the filesystem under a Policy. Each invocation
runs a fresh state machine:

    IDLE -> PLANNING -> EXECUTING -> COMPLETED | ABORTED

A dry run stops after the reporting stage (PLANNING -> COMPLETED) and
never touches the filesystem, not even to probe for existing entries.
Fatal conditions stop forward progress; actions already applied are kept.
"""

import logging
import os
from typing import Dict, FrozenSet, List, Optional

from maketree.core.execution.reporter import Reporter
from maketree.domain.config import Policy
from maketree.domain.errors import ConflictingKind, ExecutionError, FilesystemFailure
from maketree.domain.execution_models import (
    OUTCOME_CREATED,
    OUTCOME_OVERWRITTEN,
    OUTCOME_PLANNED,
    OUTCOME_SKIPPED,
    ActionOutcome,
    ExecutionResult,
    ExecutorState,
    create_aborted_result,
    create_finished_result,
)
from maketree.domain.plan_models import Action, ActionKind, Plan
from maketree.infra.fs import (
    KIND_DIRECTORY,
    KIND_FILE,
    entry_kind,
    make_directory,
    write_file,
)

logger = logging.getLogger(__name__)

_TRANSITIONS: Dict[ExecutorState, FrozenSet[ExecutorState]] = {
    ExecutorState.IDLE: frozenset({ExecutorState.PLANNING}),
    ExecutorState.PLANNING: frozenset({
        ExecutorState.EXECUTING, ExecutorState.COMPLETED, ExecutorState.ABORTED,
    }),
    ExecutorState.EXECUTING: frozenset({ExecutorState.COMPLETED, ExecutorState.ABORTED}),
    ExecutorState.COMPLETED: frozenset(),
    ExecutorState.ABORTED: frozenset(),
}

# -----------------------------------------------------------------------------
# EXECUTOR
# -----------------------------------------------------------------------------

class TreeExecutor:
    """
    Single-use executor for one plan.

    Args:
        policy: Dry-run/force/verbosity settings for the run.
        reporter: Sink for per-action lines. Defaults to stdout at the
            policy's verbosity.
    """

    def __init__(self, policy: Policy, reporter: Optional[Reporter] = None) -> None:
        self._policy = policy
        self._reporter = reporter if reporter is not None else Reporter(verbosity=policy.verbosity)
        self._state = ExecutorState.IDLE

    @property
    def state(self) -> ExecutorState:
        """Current lifecycle state."""
        return self._state

    def run(self, plan: Plan) -> ExecutionResult:
        """
        Apply (or preview) every action of a plan in order.

        Args:
            plan: Pre-ordered actions under an absolute destination.

        Returns:
            ExecutionResult: COMPLETED, COMPLETED_WITH_SKIPS or ABORTED.

        Raises:
            RuntimeError: If the executor has already been used.
        """
        self._transition(ExecutorState.PLANNING)
        logger.info(f"Executing {len(plan)} actions under {plan.destination}")

        if self._policy.dry_run:
            return self._preview(plan)

        self._transition(ExecutorState.EXECUTING)
        outcomes: List[ActionOutcome] = []
        try:
            self._prepare_destination(plan.destination)
            for action in plan.actions:
                outcome = self._apply(action, action.resolve(plan.destination))
                outcomes.append(outcome)
                self._reporter.action(outcome)
        except ExecutionError as e:
            self._transition(ExecutorState.ABORTED)
            logger.error(f"Execution aborted after {len(outcomes)} actions: {e}")
            self._reporter.error(str(e))
            return create_aborted_result(
                str(e),
                destination=plan.destination,
                last_path=e.path,
                outcomes=outcomes,
            )

        self._transition(ExecutorState.COMPLETED)
        return create_finished_result(plan.destination, outcomes)

    # -------------------------------------------------------------------------
    # STAGES
    # -------------------------------------------------------------------------

    def _preview(self, plan: Plan) -> ExecutionResult:
        """Report every action as planned without any filesystem call."""
        outcomes = [
            ActionOutcome(action=a, path=a.resolve(plan.destination), status=OUTCOME_PLANNED)
            for a in plan.actions
        ]
        for outcome in outcomes:
            self._reporter.action(outcome)
        self._transition(ExecutorState.COMPLETED)
        return create_finished_result(plan.destination, outcomes, dry_run=True)

    def _prepare_destination(self, destination: str) -> None:
        """Create the destination root if missing."""
        found = entry_kind(destination)
        if found == KIND_FILE:
            raise ConflictingKind(destination, KIND_DIRECTORY, found)
        if found is None:
            logger.debug(f"Creating destination root {destination}")
            try:
                os.makedirs(destination, exist_ok=True)
            except (OSError, ValueError) as e:
                raise FilesystemFailure(destination, e) from e

    def _apply(self, action: Action, path: str) -> ActionOutcome:
        """Apply one action, deciding between create, overwrite and skip."""
        is_dir = action.kind is ActionKind.MAKE_DIRECTORY
        expected = KIND_DIRECTORY if is_dir else KIND_FILE
        found = entry_kind(path)

        if found is not None and found != expected:
            raise ConflictingKind(path, expected, found)

        if found is not None and not self._policy.force:
            logger.debug(f"Skipping existing {found}: {path}")
            return ActionOutcome(action=action, path=path, status=OUTCOME_SKIPPED)

        try:
            if is_dir:
                # An existing directory is kept with its contents under force
                if found is None:
                    make_directory(path)
            else:
                write_file(path, action.content)
        # ValueError: the OS layer rejects the path itself (embedded NUL)
        except (OSError, ValueError) as e:
            raise FilesystemFailure(path, e) from e

        status = OUTCOME_CREATED if found is None else OUTCOME_OVERWRITTEN
        logger.debug(f"{status}: {path}")
        return ActionOutcome(action=action, path=path, status=status)

    def _transition(self, new_state: ExecutorState) -> None:
        if new_state not in _TRANSITIONS[self._state]:
            raise RuntimeError(f"Invalid executor transition {self._state.value} -> {new_state.value}")
        logger.debug(f"Executor state {self._state.value} -> {new_state.value}")
        self._state = new_state


def execute_plan(plan: Plan, policy: Policy, reporter: Optional[Reporter] = None) -> ExecutionResult:
    """Run a plan with a fresh executor."""
    return TreeExecutor(policy, reporter).run(plan)
