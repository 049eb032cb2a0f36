from __future__ import annotations

"""
Tree Renderer.

Converts a FileTree into a textual listing in either dialect. Children
are rendered in arena order, so a parsed listing renders back in its
source order and a scanned directory renders sorted.
"""

from typing import List

from maketree.domain.tree_models import ROOT_INDEX, Dialect, FileTree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: FileTree, dialect: Dialect = Dialect.TREE) -> List[str]:
    """
    Render a tree as listing lines.

    Args:
        tree: The tree to render (root excluded from the output).
        dialect: TREE for box-drawing connectors, PLAIN for two-space indentation.

    Returns:
        List[str]: Rendered lines without trailing newlines.
    """
    lines: List[str] = []
    if dialect is Dialect.PLAIN:
        for node in tree.walk_preorder():
            suffix = "/" if node.is_directory else ""
            lines.append(f"{'  ' * (node.depth - 1)}{node.name}{suffix}")
        return lines

    _render_box(tree, ROOT_INDEX, "", lines)
    return lines


def render_summary(tree: FileTree) -> str:
    """Trailing count line in the format printed by `tree`."""
    dirs = sum(1 for n in tree.walk_preorder() if n.is_directory)
    files = len(tree) - dirs
    dir_word = "directory" if dirs == 1 else "directories"
    file_word = "file" if files == 1 else "files"
    return f"{dirs} {dir_word}, {files} {file_word}"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_box(tree: FileTree, index: int, prefix: str, lines: List[str]) -> None:
    """Recursively emit connector lines (├──, └──) for the children of a node."""
    children = tree.children(index)
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        suffix = "/" if child.is_directory else ""
        lines.append(f"{prefix}{connector}{child.name}{suffix}")

        if child.is_directory:
            _render_box(tree, child.index, prefix + ("    " if is_last else "│   "), lines)
