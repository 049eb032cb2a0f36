from __future__ import annotations

"""
Directory Tree Scanner.

Builds a FileTree from an existing directory so it can be rendered back
into a tree listing. Entries are sorted by name at each level, matching
what the `tree` tool prints.
"""

import logging
import os
from typing import Dict

from maketree.domain.tree_models import ROOT_INDEX, FileTree

logger = logging.getLogger(__name__)


def scan_directory(input_path: str) -> FileTree:
    """
    Walk a directory and mirror it as a FileTree.

    Symlinks to directories are listed as directories but not followed.

    Args:
        input_path: Directory to scan.

    Returns:
        FileTree: Tree rooted at input_path.
    """
    tree = FileTree()
    index_by_root: Dict[str, int] = {os.path.abspath(input_path): ROOT_INDEX}

    for root, dirs, files in os.walk(input_path, onerror=_log_walk_error):
        dirs.sort()
        parent = index_by_root[os.path.abspath(root)]
        subdirs = set(dirs)

        for name in sorted(dirs + files):
            is_dir = name in subdirs
            index = tree.add_child(parent, name, is_dir)
            if is_dir:
                index_by_root[os.path.abspath(os.path.join(root, name))] = index

    logger.debug(f"Scanned {len(tree)} entries under {input_path}")
    return tree


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Cannot list directory '{error.filename}': {error.strerror}")
