from __future__ import annotations

"""
Directory Tree Builder.

Walks an extracted repository on disk and produces the TreeNode tree that the
/tree endpoint serves. Entries are listed in name order and directory
symlinks are reported as leaves rather than followed.
"""

import logging
import os
from typing import Dict, List, Tuple

from repotree.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path: str) -> TreeNode:
    """
    Build the TreeNode tree rooted at `path`.

    Entries that vanish or cannot be inspected during the walk are skipped,
    and a directory that cannot be listed is reported without children.

    Args:
        path: File or directory to describe.

    Returns:
        TreeNode: Root node named after the base name of `path`.

    Raises:
        FileNotFoundError: If `path` does not exist.
    """
    root_path = os.path.abspath(path)
    root_is_dir = os.path.isdir(root_path)
    if not root_is_dir and not os.path.exists(root_path):
        raise FileNotFoundError(root_path)

    # (path, name, is_dir, child paths) in pre-order
    order: List[Tuple[str, str, bool, List[str]]] = []
    pending: List[Tuple[str, str, bool]] = [(root_path, os.path.basename(root_path), root_is_dir)]

    while pending:
        entry_path, name, is_dir = pending.pop()
        children = _list_children(entry_path) if is_dir else []
        order.append((entry_path, name, is_dir, [c[0] for c in children]))
        pending.extend(children)

    built: Dict[str, TreeNode] = {}
    for entry_path, name, is_dir, child_paths in reversed(order):
        built[entry_path] = TreeNode(
            name=name,
            is_dir=is_dir,
            children=tuple(built.pop(p) for p in child_paths),
        )

    return built[root_path]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _list_children(dir_path: str) -> List[Tuple[str, str, bool]]:
    """Return (path, name, is_dir) for each readable entry, sorted by name."""
    try:
        with os.scandir(dir_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning(f"Cannot list directory '{dir_path}': {e}")
        return []

    children: List[Tuple[str, str, bool]] = []
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Skipping unreadable entry '{entry.path}': {e}")
            continue
        children.append((entry.path, entry.name, is_dir))
    return children
