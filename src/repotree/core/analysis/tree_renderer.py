from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode tree into indented text, one line per entry:
two spaces per nesting level, a folder or file icon, then the entry name.
Traversal uses an explicit stack, so the depth of server-supplied trees is
not limited by the interpreter recursion limit.
"""

from typing import List, Optional, Tuple

from repotree.domain.constants import FILE_ICON, FOLDER_ICON, INDENT_UNIT
from repotree.domain.errors import TreeDepthExceeded
from repotree.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        node: TreeNode,
        depth: int = 0,
        *,
        max_depth: Optional[int] = None,
) -> str:
    """
    Render a tree as a multi-line text block.

    Every line, including the last, ends with a newline.

    Args:
        node: Root of the tree to render.
        depth: Indentation level of the root line.
        max_depth: Optional bound on nesting below `node`.

    Returns:
        str: The formatted tree.

    Raises:
        ValueError: If `depth` is negative.
        TreeDepthExceeded: If the tree nests deeper than `max_depth`.
    """
    return "".join(f"{line}\n" for line in render_lines(node, depth, max_depth=max_depth))


def render_lines(
        node: TreeNode,
        depth: int = 0,
        *,
        max_depth: Optional[int] = None,
) -> List[str]:
    """
    Render a tree as a list of lines without trailing newlines.

    Entries appear in pre-order: a directory line is followed by the lines
    of each child, in order.

    Args:
        node: Root of the tree to render.
        depth: Indentation level of the root line.
        max_depth: Optional bound on nesting below `node`.

    Returns:
        List[str]: One formatted line per entry.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    lines: List[str] = []
    stack: List[Tuple[TreeNode, int]] = [(node, depth)]

    while stack:
        current, level = stack.pop()

        if max_depth is not None and level - depth > max_depth:
            raise TreeDepthExceeded(max_depth)

        lines.append(format_line(current, level))

        if current.has_children:
            # Reversed push keeps children in their original order when popped
            for child in reversed(current.children):
                stack.append((child, level + 1))

    return lines


def format_line(node: TreeNode, depth: int) -> str:
    """Format a single entry at the given indentation level."""
    icon = FOLDER_ICON if node.is_dir else FILE_ICON
    return f"{INDENT_UNIT * depth}{icon}{node.name}"
