"""Testing utilities for PivotTreeLib consumers."""

from .fixtures import TreeSnapshot, build_tree, find_node, shape_of, snapshot

__all__ = ['TreeSnapshot', 'build_tree', 'find_node', 'shape_of', 'snapshot']
