from __future__ import annotations

"""
Directory Tree Data Models.

Provides the immutable TreeNode structure exchanged between the snapshot
service and the tree client, plus conversion to and from the JSON wire shape
`{name, is_dir, children?}`.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Set, Tuple

from repotree.domain.errors import TreeFormatError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    A single file or directory entry.

    Attributes:
        name: Base name of the entry.
        is_dir: True for directories.
        children: Ordered child entries. Empty for files and empty directories.
    """
    name: str
    is_dir: bool = False
    children: Tuple["TreeNode", ...] = ()

    @property
    def has_children(self) -> bool:
        """Whether the node carries at least one child entry."""
        return bool(self.children)

    @classmethod
    def from_dict(cls, data: Any) -> "TreeNode":
        """
        Build a TreeNode tree from parsed JSON.

        Walks the payload with an explicit stack so that deeply nested trees
        do not hit the interpreter recursion limit.

        Args:
            data: Parsed JSON value, expected to be a mapping.

        Returns:
            TreeNode: The root of the rebuilt tree.

        Raises:
            TreeFormatError: If any node is malformed, or a node object is
                reachable twice (shared or cyclic structure).
        """
        order: List[Tuple[Dict[str, Any], List[Any]]] = []
        seen: Set[int] = set()
        pending: List[Any] = [data]

        # Pre-order pass: validate and record every node once
        while pending:
            raw = pending.pop()
            _check_node(raw)
            if id(raw) in seen:
                raise TreeFormatError("Malformed tree: node referenced more than once")
            seen.add(id(raw))

            children = _raw_children(raw)
            order.append((raw, children))
            pending.extend(children)

        # Reverse pre-order visits every child before its parent
        built: Dict[int, TreeNode] = {}
        for raw, children in reversed(order):
            built[id(raw)] = cls(
                name=raw["name"],
                is_dir=bool(raw.get("is_dir", False)),
                children=tuple(built.pop(id(c)) for c in children),
            )

        return built[id(data)]

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the tree to its JSON wire shape.

        The `children` key is omitted when a node has no children.
        """
        root = _node_fields(self)
        stack: List[Tuple[TreeNode, Dict[str, Any]]] = [(self, root)]

        while stack:
            node, out = stack.pop()
            if not node.has_children:
                continue
            out["children"] = []
            for child in node.children:
                child_out = _node_fields(child)
                out["children"].append(child_out)
                stack.append((child, child_out))

        return root


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _node_fields(node: TreeNode) -> Dict[str, Any]:
    return {"name": node.name, "is_dir": node.is_dir}


def _check_node(raw: Any) -> None:
    """Reject values that cannot be read as a TreeNode."""
    if not isinstance(raw, dict):
        raise TreeFormatError(
            f"Malformed tree node: expected object, received {type(raw).__name__}"
        )
    if not isinstance(raw.get("name"), str):
        raise TreeFormatError("Malformed tree node: missing 'name'")


def _raw_children(raw: Dict[str, Any]) -> List[Any]:
    """Return the raw child list, treating absent or null as empty."""
    children = raw.get("children")
    if children is None:
        return []
    if not isinstance(children, list):
        raise TreeFormatError(
            f"Malformed tree node '{raw['name']}': 'children' must be a list"
        )
    return children
