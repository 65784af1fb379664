"""Exceptions raised by PivotTreeLib.

Rotation failures come in two distinguishable kinds so callers can react
differently: a missing node usually means a programming error, while a
broken parent/child relationship may point at a stale reference.
"""

from typing import Any, List, Optional


class RotationError(Exception):
    """Base class for errors raised while rotating a tree."""
    pass


class NullNodeError(RotationError, TypeError):
    """Raised when the child or parent passed to a rotation is None."""

    def __init__(self, child_missing: bool, parent_missing: bool):
        self.child_missing = child_missing
        self.parent_missing = parent_missing
        missing = [name for name, flag in (("child", child_missing), ("parent", parent_missing)) if flag]
        verb = "are" if len(missing) > 1 else "is"
        super().__init__(f"Cannot rotate with a missing node: {' and '.join(missing)} {verb} None")


class NotAChildError(RotationError, ValueError):
    """Raised when the child is not a direct left or right child of the parent."""

    def __init__(self, child: Any, parent: Any):
        self.child = child
        self.parent = parent
        super().__init__(f"{child!r} is not a direct child of {parent!r}")


class StructureError(RotationError):
    """Raised when post-rotation verification finds an inconsistent tree."""

    def __init__(self, problems: List[str], message: Optional[str] = None):
        self.problems = list(problems)
        super().__init__(message or f"Tree structure is inconsistent: {'; '.join(self.problems)}")
