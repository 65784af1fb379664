"""Node rotation, the rebalancing primitive of self-balancing trees.

A rotation swaps the tree positions of a parent and one of its children
while keeping every subtree intact. Deciding *when* to rotate belongs to a
balancing policy (AVL, red-black, splay) built on top of this module.

Not thread-safe: callers sharing a tree between threads must hold one lock
over the whole tree around every structural change.
"""

import logging
from enum import Enum
from typing import Optional, TypeVar

from ..config import RotationConfig
from ..errors import NotAChildError, NullNodeError, StructureError
from .integrity import find_structure_errors
from .node import BinaryNode
from .tree import BinarySearchTree

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RotationDirection(Enum):
    """Which way a rotation turns.

    A left child is promoted by a right rotation and a right child by a
    left rotation.
    """
    LEFT = "left"
    RIGHT = "right"


_OPPOSITE = {
    RotationDirection.LEFT: RotationDirection.RIGHT,
    RotationDirection.RIGHT: RotationDirection.LEFT,
}


def rotation_direction(
    child: Optional[BinaryNode], parent: Optional[BinaryNode]
) -> RotationDirection:
    """Report which rotation would promote child over parent.

    Performs the same checks as ``RotatingTree.rotate`` without touching
    the tree.

    Raises:
        NullNodeError: If child or parent is None (checked first)
        NotAChildError: If child is not a direct child of parent
    """
    if child is None or parent is None:
        raise NullNodeError(child is None, parent is None)

    if parent.left is child:
        return RotationDirection.RIGHT
    if parent.right is child:
        return RotationDirection.LEFT
    raise NotAChildError(child, parent)


class RotatingTree(BinarySearchTree[T]):
    """Binary search tree that supports single rotations.

    All nodes handed to ``rotate`` must belong to this tree. Nothing checks
    this; rotating nodes owned by another tree leaves both trees undefined.
    """

    def __init__(self, config: Optional[RotationConfig] = None):
        """Create an empty tree.

        Args:
            config: Rotation options (defaults to RotationConfig())

        Raises:
            ValueError: If the config fails validation
        """
        super().__init__()
        self.config = config or RotationConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

    def rotate(self, child: Optional[BinaryNode[T]], parent: Optional[BinaryNode[T]]) -> None:
        """Exchange the positions of child and parent.

        When child is parent's left child this is a right rotation: child's
        right subtree becomes parent's left subtree and parent becomes
        child's right child. The right-child case is the mirror image.
        Whatever pointed at parent before (its own parent, or the tree's
        root) points at child afterwards.

        A failed call leaves the tree exactly as it was. Argument checks,
        and with verify_structure the consistency check, run before the
        first write; a rotation that still leaves the tree inconsistent is
        undone before StructureError is raised.

        Args:
            child: Node moving up into parent's position
            parent: Node moving down to become a child of child

        Raises:
            NullNodeError: If either node is None
            NotAChildError: If child is not a direct child of parent
            StructureError: If verify_structure is on and the tree is
                inconsistent before or after the rotation
        """
        try:
            direction = rotation_direction(child, parent)
        except (NullNodeError, NotAChildError) as e:
            logger.debug("Rejected rotation: %s", e)
            raise

        if self.config.verify_structure:
            self._check_structure("before")

        self._relink(child, parent, direction)

        if self.config.verify_structure:
            try:
                self._check_structure("after")
            except StructureError:
                # Inverse rotation restores every reference it touched
                self._relink(parent, child, _OPPOSITE[direction])
                raise

        if self.config.log_rotations:
            logger.debug(
                "Rotated %s: %r promoted over %r",
                direction.value, child.value, parent.value,
            )

    def _relink(self, child: BinaryNode[T], parent: BinaryNode[T], direction: RotationDirection) -> None:
        grandparent = parent.parent

        if direction is RotationDirection.RIGHT:
            moved = child.right
            parent.left = moved
            child.right = parent
        else:
            moved = child.left
            parent.right = moved
            child.left = parent

        if moved is not None:
            moved.parent = parent
        parent.parent = child

        child.parent = grandparent
        if grandparent is None:
            self.root = child
        elif grandparent.left is parent:
            grandparent.left = child
        else:
            grandparent.right = child

    def _check_structure(self, when: str) -> None:
        problems = find_structure_errors(self)
        if problems:
            logger.error("Tree inconsistent %s rotation: %s", when, "; ".join(problems))
            raise StructureError(problems)
