"""Core components: nodes, the tree handle, and rotation."""

from .node import BinaryNode
from .tree import BinarySearchTree
from .rotation import RotatingTree, RotationDirection, rotation_direction
from .integrity import find_structure_errors, reachable_nodes

__all__ = [
    'BinaryNode',
    'BinarySearchTree',
    'RotatingTree',
    'RotationDirection',
    'rotation_direction',
    'find_structure_errors',
    'reachable_nodes',
]
