"""Configuration for PivotTreeLib rotations.

Rotation itself has no tunable behaviour; the options here only control
what happens around it: whether the tree is re-checked afterwards and
whether each rotation is logged.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class RotationConfig:
    """Options for a RotatingTree."""

    verify_structure: bool = False  # Re-check links after each rotation
    log_rotations: bool = True      # DEBUG record per rotation

    @classmethod
    def strict(cls) -> 'RotationConfig':
        """Create config that verifies the tree after every rotation.

        Verification walks the whole tree, so it turns an O(1) rotation
        into an O(n) one. Meant for tests and debugging.

        Returns:
            RotationConfig with structure verification enabled
        """
        return cls(verify_structure=True)

    @classmethod
    def quiet(cls) -> 'RotationConfig':
        """Create config with rotation logging turned off."""
        return cls(log_rotations=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.verify_structure, bool):
            errors.append("verify_structure must be a bool")

        if not isinstance(self.log_rotations, bool):
            errors.append("log_rotations must be a bool")

        return errors
