from __future__ import annotations

"""
Plan Generator.

Walks a FileTree in pre-order and emits the ordered filesystem actions
that reproduce it under a destination root. Parents always precede their
descendants and siblings keep their source order, so a dry-run preview
reads like the original listing.
"""

import logging
import os
from typing import List, Mapping, Optional, Tuple

from maketree.domain.plan_models import Action, ActionKind, Plan
from maketree.domain.tree_models import FileTree
from maketree.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def generate_plan(
        tree: FileTree,
        destination: str,
        contents: Optional[Mapping[Tuple[str, ...], bytes]] = None,
) -> Plan:
    """
    Derive the action plan for a tree.

    Args:
        tree: Parsed node tree.
        destination: Destination root (relative paths resolve against cwd).
        contents: Optional file bodies keyed by destination-relative segments.

    Returns:
        Plan: Actions in pre-order with an absolute destination.
    """
    root = normalize_path(destination, os.getcwd())
    bodies = contents or {}
    actions: List[Action] = []

    for node in tree.walk_preorder():
        target = tree.path_of(node.index)
        if node.is_directory:
            actions.append(Action(target=target, kind=ActionKind.MAKE_DIRECTORY))
        else:
            actions.append(Action(
                target=target,
                kind=ActionKind.WRITE_FILE,
                content=bodies.get(target, b""),
            ))

    plan = Plan(destination=root, actions=actions)
    logger.info(
        f"Plan for {root}: {plan.directory_count} directories, {plan.file_count} files."
    )
    return plan
