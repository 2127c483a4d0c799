"""Base class for named, optionally parented nodes of the tree."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

from foldertree.errors import InvalidArgumentError

if TYPE_CHECKING:
    from foldertree.folder import Folder


def validate_name(name: str | None) -> str:
    """Check that a name is usable for a file or folder.

    Args:
        name: Candidate name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidArgumentError: If the name is None, empty or only whitespace.
    """
    if name is None or not name.strip():
        raise InvalidArgumentError("Name cannot be None or empty.")
    return name


class Entity(ABC):
    """A named node that may belong to a parent folder.

    A folder owns its children through its collections. The parent link is a
    back reference for ancestry walks and sibling checks; setting it does not
    change any collection.
    """

    def __init__(self, name: str, parent: Folder | None = None) -> None:
        """Initialize the entity.

        Args:
            name: Display name of the entity.
            parent: Owning folder. Subclasses register themselves with it.

        Raises:
            InvalidArgumentError: If the name is None, empty or only whitespace.
        """
        self._name = validate_name(name)
        self._parent: Folder | None = None
        self._link_parent(parent)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Folder | None:
        return self._parent

    @property
    def display_name(self) -> str:
        """Name shown in paths and tree views."""
        return self._name

    @property
    def path(self) -> str:
        """Slash-joined display names from the topmost ancestor to this entity."""
        parts = [self.display_name]
        current = self.parent
        while current is not None:
            parts.append(current.display_name)
            current = current.parent
        return "/".join(reversed(parts))

    def rename(self, new_name: str) -> None:
        """Rename the entity.

        Args:
            new_name: The new name.

        Raises:
            InvalidArgumentError: If the name is invalid or clashes with a sibling.
        """
        validate_name(new_name)
        self._ensure_unique_name(new_name)
        self._name = new_name

    def reparent(self, new_parent: Folder | None) -> None:
        """Set the parent link without any validation.

        The parent's collections are left alone; use the manager to move
        entities between folders.
        """
        self._link_parent(new_parent)

    def _ensure_unique_name(self, new_name: str) -> None:
        """Hook for subclasses to reject names already taken by a sibling."""
        pass

    def _link_parent(self, parent: Folder | None) -> None:
        self._parent = parent
