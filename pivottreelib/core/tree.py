"""BinarySearchTree: the tree handle and its insertion/search collaborator.

The tree owns its node set through ``root``. Ordering only matters here,
for placing new values; rotations built on top of this class never compare
payloads.
"""

import logging
from typing import Generic, Optional, TypeVar

from .node import BinaryNode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree.

    Equal values are placed in the right subtree, so inserting a duplicate
    never disturbs the existing node holding that value.
    """

    def __init__(self):
        self.root: Optional[BinaryNode[T]] = None

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        """Drop every node by forgetting the root."""
        self.root = None

    def insert(self, value: T) -> BinaryNode[T]:
        """Insert a value and return the node created for it.

        Args:
            value: Payload to insert; must be orderable against existing payloads

        Returns:
            The new leaf node, already linked to its parent

        Raises:
            TypeError: If value is None
        """
        if value is None:
            raise TypeError("Cannot insert None into a binary search tree")

        node = BinaryNode(value)
        if self.root is None:
            self.root = node
            logger.debug("Inserted %r as root", value)
            return node

        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right

        node.parent = current
        logger.debug("Inserted %r under %r", value, current.value)
        return node

    def find(self, value: T) -> Optional[BinaryNode[T]]:
        """Return the first node holding value, or None."""
        if value is None:
            return None
        current = self.root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        root = self.root.value if self.root is not None else None
        return f"{self.__class__.__name__}(root={root!r})"
