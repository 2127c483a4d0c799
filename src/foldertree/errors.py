"""Exceptions raised by folder tree operations."""

from __future__ import annotations

__all__ = ["FolderTreeError", "IllegalHierarchyError", "InvalidArgumentError"]


class FolderTreeError(Exception):
    """Base error for folder tree operations."""

    pass


class InvalidArgumentError(FolderTreeError, ValueError):
    """A precondition on an argument was violated.

    Raised for missing arguments, duplicate sibling names, invalid names,
    destinations outside the root hierarchy and re-parenting that would
    create a cycle.
    """

    pass


class IllegalHierarchyError(FolderTreeError):
    """An operation would restructure the hierarchy around its own root."""

    pass
