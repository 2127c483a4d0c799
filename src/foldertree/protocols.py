"""Protocol definitions for tree entities and the tree manager.

Files and folders are distinct concrete classes that share one capability
surface. Ancestry checks, the scenario runner and the CLI context depend on
these protocols rather than on the concrete classes where they only need
that surface.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from foldertree.file import File
    from foldertree.folder import Folder


@runtime_checkable
class TreeEntity(Protocol):
    """Protocol for anything placed in the tree: a name and an optional parent."""

    @property
    def name(self) -> str:
        """Display name, in its original case."""
        ...

    @property
    def parent(self) -> Folder | None:
        """Owning folder, or None for a floating entity."""
        ...

    @property
    def path(self) -> str:
        """Slash-joined names from the topmost ancestor down to this entity."""
        ...

    def rename(self, new_name: str) -> None:
        """Rename the entity.

        Args:
            new_name: The new name.

        Raises:
            InvalidArgumentError: If the name is empty or collides with a sibling.
        """
        ...

    def reparent(self, new_parent: Folder | None) -> None:
        """Point the entity at a new parent folder.

        Only the parent link changes; collections are not touched.

        Args:
            new_parent: The new parent, or None to detach.
        """
        ...


@runtime_checkable
class HierarchyManager(Protocol):
    """Protocol for whole-tree operations rooted at a single folder."""

    @property
    def root(self) -> Folder:
        """The top-level folder every operation is scoped to."""
        ...

    def create_file(self, f: File) -> File:
        """Attach a clone of a file under its parent, or under root."""
        ...

    def delete_file(self, f: File) -> None:
        """Remove a file from its parent folder."""
        ...

    def copy_file(self, f: File, destination: Folder) -> File:
        """Attach a clone of a file under the destination folder."""
        ...

    def move_file(self, f: File, destination: Folder) -> File:
        """Copy a file to the destination, then delete the original."""
        ...

    def create_folder(self, f: Folder) -> Folder:
        """Attach a clone of a folder under its parent, or under root."""
        ...

    def delete_folder(self, f: Folder) -> None:
        """Remove a folder from its parent folder."""
        ...

    def copy_folder(self, f: Folder, destination: Folder) -> Folder:
        """Attach a clone of a folder under the destination folder."""
        ...

    def move_folder(self, f: Folder, destination: Folder) -> Folder:
        """Copy a folder to the destination, then delete the original."""
        ...

    def find_folder(self, path: str) -> Folder:
        """Resolve a root-relative folder path."""
        ...

    def find_file(self, path: str) -> File:
        """Resolve a root-relative file path."""
        ...

    def walk(self) -> Iterator[tuple[Folder, tuple[Folder, ...], tuple[File, ...]]]:
        """Yield every folder reachable from root with its children."""
        ...
