"""Shared data types for folder tree scenarios."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["OperationResult"]


@dataclass
class OperationResult:
    """Result of applying one scenario operation.

    Attributes:
        success: True if the operation was applied.
        operation: Operation kind, e.g. ``move_file``.
        target: Path or name the operation acted on.
        location: Path of the resulting entity in the tree (None on failure
            and for deletes).
        error: Error message (None on success).
    """

    success: bool
    operation: str
    target: str
    location: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and self.error is None:
            raise ValueError("success=False requires error message")
        if not self.operation:
            raise ValueError("operation cannot be empty")
