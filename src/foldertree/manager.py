"""Whole-tree operations scoped to a single root folder."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from foldertree.errors import IllegalHierarchyError, InvalidArgumentError
from foldertree.file import File
from foldertree.folder import Folder

logger = logging.getLogger(__name__)

# Name of the folder every manager is rooted at
ROOT_FOLDER_NAME = "root"

# Separator for root-relative paths passed to find_folder/find_file
PATH_SEPARATOR = "/"


class FileSystemManager:
    """Creates, deletes, copies and moves entries below a fixed root folder.

    Every create works on a clone of its argument; the object passed in is
    never attached to the tree. Copy and move route through create, so the
    destination is checked against the same rules.
    """

    def __init__(self) -> None:
        """Initialize the manager with an empty root folder."""
        self._root = Folder(ROOT_FOLDER_NAME, None)

    @property
    def root(self) -> Folder:
        return self._root

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def create_file(self, f: File) -> File:
        """Attach a clone of a file to the tree.

        If the file has no parent, the clone is placed in the root folder.

        Args:
            f: Template file. It is not attached itself.

        Returns:
            The clone that was attached.

        Raises:
            InvalidArgumentError: If ``f`` is None, its parent is outside the
                root hierarchy, or the target already holds a file with the
                same name and extension.
        """
        if f is None:
            raise InvalidArgumentError("File parameter cannot be None.")
        file = f.clone()
        target = self._resolve_target(file, "file")
        if target.contains_file_with_same_name(file.name, file.extension):
            raise InvalidArgumentError(
                "A file with the same name and extension already exists in the target folder."
            )
        target.add_file(file)
        logger.debug("Created file %s", file.path)
        return file

    def delete_file(self, f: File) -> None:
        """Remove a file from its parent folder.

        Does nothing if the file is not held by its parent.

        Raises:
            InvalidArgumentError: If ``f`` is None.
        """
        if f is None:
            raise InvalidArgumentError("File parameter cannot be None.")
        parent = f.parent
        if parent is not None and parent.remove_file(f):
            logger.debug("Deleted file %s", f.path)

    def copy_file(self, f: File, destination: Folder) -> File:
        """Attach a clone of a file to the destination folder.

        Returns:
            The clone that was attached.

        Raises:
            InvalidArgumentError: If either argument is None, or the clone
                cannot be created in the destination.
        """
        if f is None or destination is None:
            raise InvalidArgumentError("File and Folder parameters cannot be None.")
        copied = f.clone()
        copied.reparent(destination)
        return self.create_file(copied)

    def move_file(self, f: File, destination: Folder) -> File:
        """Copy a file to the destination folder, then delete the original.

        If the copy fails, the original is left where it was.

        Returns:
            The clone now held by the destination.

        Raises:
            InvalidArgumentError: If either argument is None, or the copy fails.
        """
        if f is None or destination is None:
            raise InvalidArgumentError("File and Folder parameters cannot be None.")
        moved = self.copy_file(f, destination)
        self.delete_file(f)
        return moved

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    def create_folder(self, f: Folder) -> Folder:
        """Attach a clone of a folder to the tree.

        If the folder has no parent, the clone is placed in the root folder.
        The clone shares its children with ``f``.

        Args:
            f: Template folder. It is not attached itself.

        Returns:
            The clone that was attached.

        Raises:
            InvalidArgumentError: If ``f`` is None, its parent is outside the
                root hierarchy, or the target already holds a folder with the
                same name.
        """
        if f is None:
            raise InvalidArgumentError("Folder parameter cannot be None.")
        folder = f.clone()
        target = self._resolve_target(folder, "folder")
        if target.contains_folder_with_same_name(folder.name):
            raise InvalidArgumentError(
                "A folder with the same name already exists in the target folder."
            )
        target.add_folder(folder)
        logger.debug("Created folder %s", folder.path)
        return folder

    def delete_folder(self, f: Folder) -> None:
        """Remove a folder from its parent folder.

        Does nothing if the folder is not held by its parent.

        Raises:
            InvalidArgumentError: If ``f`` is None.
        """
        if f is None:
            raise InvalidArgumentError("Folder parameter cannot be None.")
        parent = f.parent
        if parent is not None and parent.remove_folder(f):
            logger.debug("Deleted folder %s", f.path)

    def copy_folder(self, f: Folder, destination: Folder) -> Folder:
        """Attach a clone of a folder to the destination folder.

        Returns:
            The clone that was attached.

        Raises:
            IllegalHierarchyError: If ``f`` is the root folder.
            InvalidArgumentError: If either argument is None, the destination
                is ``f`` or inside it, or the clone cannot be created there.
        """
        if f is None or destination is None:
            raise InvalidArgumentError("Folder parameters cannot be None.")
        self._check_relocatable(f, destination, "copy")
        copied = f.clone()
        copied.reparent(destination)
        return self.create_folder(copied)

    def move_folder(self, f: Folder, destination: Folder) -> Folder:
        """Copy a folder to the destination folder, then delete the original.

        If the copy fails, the original is left where it was.

        Returns:
            The clone now held by the destination.

        Raises:
            IllegalHierarchyError: If ``f`` is the root folder.
            InvalidArgumentError: If either argument is None, the destination
                is ``f`` or inside it, or the copy fails.
        """
        if f is None or destination is None:
            raise InvalidArgumentError("Folder parameters cannot be None.")
        self._check_relocatable(f, destination, "move")
        moved = self.copy_folder(f, destination)
        self.delete_folder(f)
        return moved

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_folder(self, path: str) -> Folder:
        """Resolve a root-relative folder path such as ``docs/reports``.

        An empty path or a lone separator resolves to the root folder.
        Matching is case-insensitive.

        Raises:
            InvalidArgumentError: If no folder exists at the path.
        """
        folder = self._root
        for part in _split_path(path):
            child = folder.get_folder(part)
            if child is None:
                raise InvalidArgumentError(f"No folder at path '{path}'.")
            folder = child
        return folder

    def find_file(self, path: str) -> File:
        """Resolve a root-relative file path such as ``docs/report.txt``.

        The text after the last dot of the final segment is the extension.
        A file whose name itself contains a dot and whose extension is empty
        (name ``a.txt``, extension ``""``) renders the same as name ``a`` with
        extension ``txt``; only the latter is reachable by path.

        Raises:
            InvalidArgumentError: If no file exists at the path.
        """
        parts = _split_path(path)
        if not parts:
            raise InvalidArgumentError("File path cannot be empty.")
        name, extension = split_file_name(parts[-1])
        folder = self.find_folder(PATH_SEPARATOR.join(parts[:-1]))
        file = folder.get_file(name, extension)
        if file is None:
            raise InvalidArgumentError(f"No file at path '{path}'.")
        return file

    def walk(self) -> Iterator[tuple[Folder, tuple[Folder, ...], tuple[File, ...]]]:
        """Yield ``(folder, subfolders, files)`` depth-first from the root."""
        stack = [self._root]
        while stack:
            folder = stack.pop()
            subfolders = folder.folders
            yield folder, subfolders, folder.files
            stack.extend(reversed(subfolders))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_target(self, entity: File | Folder, kind: str) -> Folder:
        """Return the folder a new clone goes into, adopting it into root if parentless."""
        parent = entity.parent
        if parent is None:
            entity.reparent(self._root)
            return self._root
        if not self._root.is_ancestor_of(parent):
            raise InvalidArgumentError(
                "Parent folder not part of the root hierarchy. "
                f"Create the parent before creating the {kind}."
            )
        return parent

    def _check_relocatable(self, f: Folder, destination: Folder, action: str) -> None:
        if f is self._root:
            raise IllegalHierarchyError(
                f"Illegal operation: Cannot {action} a folder into its subfolder."
            )
        if f.is_ancestor_of(destination):
            raise InvalidArgumentError(
                f"Cannot {action} a folder into itself or one of its subfolders."
            )


def split_file_name(file_name: str) -> tuple[str, str]:
    """Split ``report.txt`` into ``("report", "txt")``.

    Names without a dot, or with only a leading dot, have an empty extension.
    """
    name, dot, extension = file_name.rpartition(".")
    if not dot or not name:
        return file_name, ""
    return name, extension


def _split_path(path: str) -> list[str]:
    return [part for part in path.split(PATH_SEPARATOR) if part]
