from __future__ import annotations

"""
Tree Builder.

Assembles classified entry lines into a FileTree using an explicit stack
of (arena index, listing depth) pairs for the open directories. Depth
transitions are resolved by popping closed directories; forward jumps of
more than one level abort the whole build.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from maketree.domain.errors import MalformedHierarchy
from maketree.domain.tree_models import ROOT_INDEX, ClassifiedLine, FileTree, LineKind, Node

logger = logging.getLogger(__name__)


def build_tree(lines: Iterable[ClassifiedLine]) -> FileTree:
    """
    Build the node tree for a sequence of entry lines.

    An unmarked file (box-drawing listing without `-F`) that is immediately
    followed by an entry one level deeper is promoted to a directory.

    If the first entry sits at nesting level 1, the listing is treated as
    uniformly indented and shifted down one level.

    Entries naming a relative path (`src/main.rs`) attach below their
    intermediate directories, reusing directories already in the tree.

    Args:
        lines: Classified lines in source order. Non-entry lines are ignored.

    Returns:
        FileTree: The complete tree rooted at the destination node.

    Raises:
        MalformedHierarchy: On the first line that skips a nesting level.
    """
    tree = FileTree()
    stack: List[Tuple[int, int]] = [(ROOT_INDEX, 0)]
    last: Optional[int] = None
    offset: Optional[int] = None

    for line in lines:
        if not line.is_entry:
            continue

        if offset is None:
            if line.depth > 1:
                raise MalformedHierarchy(
                    line.number, f"first entry '{line.name}' is nested {line.depth} levels deep"
                )
            offset = line.depth
            if offset:
                logger.debug("Listing is indented by one level; shifting entries.")

        depth = max(line.depth - offset, 0) + 1

        # Close every directory at or below the new entry's depth
        while stack[-1][1] >= depth:
            stack.pop()

        top, top_depth = stack[-1]
        if depth == top_depth + 2 and last is not None and _is_promotable(tree.nodes[last], top):
            tree.promote_to_directory(last)
            stack.append((last, top_depth + 1))
            top, top_depth = stack[-1]

        if depth != top_depth + 1:
            parent_name = tree.nodes[top].name or "<destination>"
            raise MalformedHierarchy(
                line.number, f"'{line.name}' skips a nesting level below '{parent_name}'"
            )

        parent = top
        for segment in line.segments[:-1]:
            parent = _directory_child(tree, parent, segment)

        is_directory = line.kind is LineKind.DIRECTORY
        last = tree.add_child(parent, line.segments[-1], is_directory, marked=line.marked)
        if is_directory:
            stack.append((last, depth))

    logger.debug(f"Built tree with {len(tree)} entries.")
    return tree


def _is_promotable(node: Node, open_parent: int) -> bool:
    """Only an unmarked file attached to the open directory can become one."""
    return not node.is_directory and not node.marked and node.parent == open_parent


def _directory_child(tree: FileTree, parent: int, name: str) -> int:
    """Index of the named child directory, created when the tree lacks it."""
    for child in tree.children(parent):
        if child.is_directory and child.name == name:
            return child.index
    return tree.add_child(parent, name, True)
