"""Leaf entity carrying file content and metadata."""

from __future__ import annotations

import copy
from datetime import datetime
from typing import TYPE_CHECKING

from foldertree.entity import Entity
from foldertree.errors import InvalidArgumentError

if TYPE_CHECKING:
    from foldertree.folder import Folder


class File(Entity):
    """A file inside a folder.

    Two files are equal when name, size and extension match. Content and
    creation date take no part in equality.

    The hash follows the name, so renaming a file changes its hash. Do not
    rename a file while it is held in a set or used as a dict key.
    """

    def __init__(
        self,
        name: str,
        parent: Folder | None,
        size: int,
        created_date: datetime,
        content: bytes | bytearray,
        extension: str,
    ) -> None:
        """Initialize a file and register it with its parent.

        Args:
            name: File name without the extension.
            parent: Owning folder, or None for a floating file.
            size: Size of the content in bytes.
            created_date: Creation timestamp.
            content: Raw file content.
            extension: File extension without the leading dot.

        Raises:
            InvalidArgumentError: If the name is invalid, or the parent already
                holds a file with the same name and extension.
        """
        super().__init__(name, parent)
        self._size = size
        self._created_date = created_date
        self._content = content
        self._extension = extension
        if parent is not None:
            parent.add_file(self)

    @property
    def size(self) -> int:
        return self._size

    @property
    def created_date(self) -> datetime:
        return self._created_date

    @property
    def content(self) -> bytes | bytearray:
        return self._content

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def full_name(self) -> str:
        """Name with the extension appended, e.g. ``report.txt``."""
        if not self._extension:
            return self._name
        return f"{self._name}.{self._extension}"

    @property
    def display_name(self) -> str:
        return self.full_name

    def clone(self) -> File:
        """Duplicate this file.

        The copy keeps the same parent link but is not registered with the
        parent. Content and creation date are copied by value.

        Returns:
            A new, unregistered File equal to this one.
        """
        duplicate = File(
            self._name,
            None,
            self._size,
            copy.copy(self._created_date),
            bytearray(self._content),
            self._extension,
        )
        duplicate.reparent(self.parent)
        return duplicate

    def _ensure_unique_name(self, new_name: str) -> None:
        parent = self.parent
        if parent is not None and parent.contains_file_with_same_name(new_name, self._extension):
            raise InvalidArgumentError(
                f'A file with the name "{new_name}" and extension "{self._extension}" '
                "already exists in the parent folder."
            )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._name == other._name
            and self._size == other._size
            and self._extension == other._extension
        )

    def __hash__(self) -> int:
        return hash((self._name, self._size, self._extension))

    def __repr__(self) -> str:
        return f"File(name={self._name!r}, extension={self._extension!r}, size={self._size})"
