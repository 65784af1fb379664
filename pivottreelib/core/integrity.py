"""Structural consistency checks for binary trees.

These helpers look at references only. They never compare payloads, so an
out-of-order tree is still "consistent" as far as they are concerned.
"""

from typing import List

from .node import BinaryNode


def reachable_nodes(tree) -> List[BinaryNode]:
    """Return every node reachable from tree.root, each once.

    Nodes reached a second time (shared subtrees or cycles) are not
    expanded again, so the walk always terminates.
    """
    nodes = []
    seen = set()
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        nodes.append(node)
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)
    return nodes


def find_structure_errors(tree) -> List[str]:
    """Check that child and parent references agree everywhere.

    Args:
        tree: Any object with a ``root`` attribute holding a BinaryNode or None

    Returns:
        List of problems found (empty if the structure is consistent)
    """
    problems = []
    root = tree.root
    if root is None:
        return problems

    if root.parent is not None:
        problems.append(f"root {root!r} has parent {root.parent!r}")

    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            problems.append(f"{node!r} is reachable more than once")
            continue
        seen.add(id(node))

        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            if child.parent is not node:
                problems.append(
                    f"{side} child {child!r} of {node!r} has parent {child.parent!r}"
                )
            stack.append(child)

    return problems
