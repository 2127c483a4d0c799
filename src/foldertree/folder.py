"""Composite entity holding files and sub-folders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from foldertree.entity import Entity
from foldertree.errors import InvalidArgumentError

if TYPE_CHECKING:
    from foldertree.file import File
    from foldertree.protocols import TreeEntity


class Folder(Entity):
    """A folder with ordered collections of files and sub-folders.

    Sibling names are unique, compared case-insensitively: files by name and
    extension, folders by name. A folder can never become its own ancestor.
    """

    def __init__(self, name: str, parent: Folder | None = None) -> None:
        """Initialize a folder and register it with its parent.

        Args:
            name: Folder name.
            parent: Owning folder. If set, this folder is added to its sub-folders.

        Raises:
            InvalidArgumentError: If the name is invalid, or the parent already
                holds a folder with the same name.
        """
        super().__init__(name, parent)
        self._files: list[File] = []
        self._folders: list[Folder] = []
        if parent is not None:
            parent.add_folder(self)

    @property
    def files(self) -> tuple[File, ...]:
        return tuple(self._files)

    @property
    def folders(self) -> tuple[Folder, ...]:
        return tuple(self._folders)

    def clone(self) -> Folder:
        """Duplicate this folder without descending into its children.

        The copy has the same name and parent link and is not registered with
        the parent. Its collections are new lists holding the same child
        objects, whose parent links still point at this folder.

        Returns:
            A new, unregistered Folder.
        """
        duplicate = Folder(self._name)
        duplicate._link_parent(self.parent)
        duplicate._files = list(self._files)
        duplicate._folders = list(self._folders)
        return duplicate

    def add_file(self, file: File) -> None:
        """Append a file to this folder.

        Args:
            file: The file to add.

        Raises:
            InvalidArgumentError: If a file with the same name and extension
                already exists in this folder.
        """
        if self.contains_file_with_same_name(file.name, file.extension):
            raise InvalidArgumentError(
                f'A file with the name "{file.name}" and extension "{file.extension}" '
                "already exists in this folder."
            )
        self._files.append(file)

    def add_folder(self, folder: Folder) -> None:
        """Append a sub-folder to this folder.

        Args:
            folder: The folder to add.

        Raises:
            InvalidArgumentError: If a folder with the same name already exists
                in this folder.
        """
        if self.contains_folder_with_same_name(folder.name):
            raise InvalidArgumentError(
                f'A folder with the name "{folder.name}" already exists in this folder.'
            )
        self._folders.append(folder)

    def remove_file(self, file: File) -> bool:
        """Remove the first file equal to ``file``.

        Returns:
            True if a file was removed, False if none matched.
        """
        try:
            self._files.remove(file)
        except ValueError:
            return False
        return True

    def remove_folder(self, folder: Folder) -> bool:
        """Remove ``folder`` from the sub-folders.

        Returns:
            True if the folder was removed, False if it was not a child.
        """
        for index, child in enumerate(self._folders):
            if child is folder:
                del self._folders[index]
                return True
        return False

    def contains_file_with_same_name(self, name: str, extension: str) -> bool:
        key = _fold(name), _fold(extension)
        return any((_fold(f.name), _fold(f.extension)) == key for f in self._files)

    def contains_folder_with_same_name(self, name: str) -> bool:
        key = _fold(name)
        return any(_fold(f.name) == key for f in self._folders)

    def contains_file(self, file: File) -> bool:
        return file in self._files

    def contains_folder(self, folder: Folder) -> bool:
        return any(child is folder for child in self._folders)

    def get_file(self, name: str, extension: str = "") -> File | None:
        """Look up a file by name and extension, ignoring case."""
        key = _fold(name), _fold(extension)
        for file in self._files:
            if (_fold(file.name), _fold(file.extension)) == key:
                return file
        return None

    def get_folder(self, name: str) -> Folder | None:
        """Look up a sub-folder by name, ignoring case."""
        key = _fold(name)
        for folder in self._folders:
            if _fold(folder.name) == key:
                return folder
        return None

    def reparent(self, new_parent: Folder | None) -> None:
        """Set the parent link unless it would create a cycle.

        Raises:
            InvalidArgumentError: If ``new_parent`` is this folder or one of
                its descendants.
        """
        if self.is_ancestor_of(new_parent):
            raise InvalidArgumentError(
                "Cannot set the parent of a folder to itself or any of its subfolders."
            )
        super().reparent(new_parent)

    def is_ancestor_of(self, candidate: TreeEntity | None) -> bool:
        """Check whether this folder is ``candidate`` or one of its ancestors.

        Args:
            candidate: Entity whose parent chain is walked upward.

        Returns:
            True if this folder is met on the way up, False otherwise.
        """
        current = candidate
        while current is not None:
            if current is self:
                return True
            current = current.parent
        return False

    def _ensure_unique_name(self, new_name: str) -> None:
        parent = self.parent
        if parent is not None and parent.contains_folder_with_same_name(new_name):
            raise InvalidArgumentError(
                f'A folder with the name "{new_name}" already exists in the same folder.'
            )

    def __repr__(self) -> str:
        return (
            f"Folder(name={self._name!r}, files={len(self._files)}, "
            f"folders={len(self._folders)})"
        )


def _fold(value: str | None) -> str:
    """Comparison key for case-insensitive name matching."""
    return (value or "").casefold()
