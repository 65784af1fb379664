"""Test fixtures for PivotTreeLib consumers.

Balancing policies built on rotations are easiest to test against exact
tree shapes. These helpers build a tree from a nested-tuple description,
render a tree back into one, and capture every reference so a test can
prove that a structure was restored node for node.

Shape format:
    (value, left, right)   where left/right are shapes or None
    value                  shorthand for a leaf (value, None, None)

Example:
    tree = build_tree((50, (40, (20, 10, 30), 45), None))
    before = snapshot(tree)
    tree.rotate(find_node(tree, 20), find_node(tree, 40))
    assert shape_of(tree) == (50, (20, 10, (40, 30, 45)), None)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.integrity import reachable_nodes
from ..core.node import BinaryNode
from ..core.rotation import RotatingTree


def _build_node(shape: Any, parent: Optional[BinaryNode]) -> Optional[BinaryNode]:
    if shape is None:
        return None
    if not isinstance(shape, tuple):
        shape = (shape, None, None)
    if len(shape) != 3:
        raise ValueError(f"Shape must be (value, left, right), got {shape!r}")

    value, left, right = shape
    node = BinaryNode(value, parent=parent)
    node.left = _build_node(left, node)
    node.right = _build_node(right, node)
    return node


def build_tree(shape: Any, tree: Optional[RotatingTree] = None) -> RotatingTree:
    """Build a tree whose structure matches shape exactly.

    No ordering is enforced, so shapes that are not valid search trees
    can be built on purpose.

    Args:
        shape: Nested (value, left, right) tuples, or None for an empty tree
        tree: Tree to populate (defaults to a new RotatingTree); its current
            contents are replaced

    Returns:
        The populated tree
    """
    if tree is None:
        tree = RotatingTree()
    tree.root = _build_node(shape, None)
    return tree


def shape_of(tree) -> Any:
    """Render a tree as nested (value, left, right) tuples.

    Leaves come back in the bare-value shorthand, so
    ``shape_of(build_tree((1, (0, None, None), 2)))`` is ``(1, 0, 2)``.
    Leaf payloads that are themselves tuples make the output ambiguous.
    """
    def render(node: Optional[BinaryNode]) -> Any:
        if node is None:
            return None
        if node.is_leaf():
            return node.value
        return (node.value, render(node.left), render(node.right))

    return render(tree.root)


def find_node(tree, value: Any) -> BinaryNode:
    """Return the reachable node holding value, searching by structure.

    Unlike ``BinarySearchTree.find`` this does not rely on ordering.

    Raises:
        KeyError: If no reachable node holds value
    """
    for node in reachable_nodes(tree):
        if node.value == value:
            return node
    raise KeyError(value)


@dataclass(frozen=True)
class TreeSnapshot:
    """Every reference in a tree, keyed by node identity."""

    root: Optional[int]
    links: Dict[int, Tuple[Optional[int], Optional[int], Optional[int]]]

    @property
    def node_ids(self):
        return frozenset(self.links)


def _ref(node: Optional[BinaryNode]) -> Optional[int]:
    return None if node is None else id(node)


def snapshot(tree) -> TreeSnapshot:
    """Capture root plus (left, right, parent) of every reachable node.

    Two snapshots compare equal only if the same node objects sit in the
    same positions. Keep the nodes alive between snapshots; identities are
    object ids.
    """
    links = {
        id(node): (_ref(node.left), _ref(node.right), _ref(node.parent))
        for node in reachable_nodes(tree)
    }
    return TreeSnapshot(root=_ref(tree.root), links=links)
