"""PivotTreeLib - Binary tree rotations.

PivotTreeLib provides the single-rotation primitive that self-balancing
search trees (AVL, red-black, splay) are built from, together with a plain
binary search tree to rotate.

Usage:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from pivottreelib import RotatingTree

    tree = RotatingTree()
    parent = tree.insert(40)
    child = tree.insert(20)
    tree.rotate(child, parent)    # 20 is now the root
━━━━━━━━━━━━━━━━━━━━━━━━━━

The library never decides when to rotate; that is the job of whatever
balancing policy sits on top of it.
"""

import logging

__version__ = "0.1.0"

from .core import (
    BinaryNode,
    BinarySearchTree,
    RotatingTree,
    RotationDirection,
    rotation_direction,
    find_structure_errors,
    reachable_nodes,
)
from .config import RotationConfig
from .errors import (
    RotationError,
    NullNodeError,
    NotAChildError,
    StructureError,
)

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "BinaryNode",
    "BinarySearchTree",
    "RotatingTree",
    "RotationDirection",
    "rotation_direction",
    "find_structure_errors",
    "reachable_nodes",
    # Config
    "RotationConfig",
    # Errors
    "RotationError",
    "NullNodeError",
    "NotAChildError",
    "StructureError",
]
