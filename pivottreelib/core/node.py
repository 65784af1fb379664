"""BinaryNode abstraction for PivotTreeLib.

A BinaryNode is a plain container: a payload plus three references. The
payload is opaque to everything in this package except the insertion
collaborator in ``tree.py``; rotations only rewrite references.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class BinaryNode(Generic[T]):
    """One vertex of a binary tree.

    ``left``, ``right`` and ``parent`` are read/write attributes. The parent
    link is a back-reference used for navigation; the tree handle owns the
    node set through its root.

    Nodes compare by identity. Two nodes holding equal values are still
    different nodes, which is what the rotation relies on.
    """

    def __init__(
        self,
        value: T,
        left: "Optional[BinaryNode[T]]" = None,
        right: "Optional[BinaryNode[T]]" = None,
        parent: "Optional[BinaryNode[T]]" = None,
    ):
        self.value = value
        self.left = left
        self.right = right
        self.parent = parent

    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.left is None and self.right is None

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.value!r})"
