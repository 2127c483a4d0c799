"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from foldertree.file import File
from foldertree.folder import Folder
from foldertree.manager import FileSystemManager

FILE_CONTENT = b"Basic file content example."
FILE_EXTENSION = "txt"


@pytest.fixture
def created_date() -> datetime:
    """Fixed creation timestamp."""
    return datetime(2024, 5, 17, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_file(created_date: datetime) -> Callable[..., File]:
    """Factory for files sharing the default content and extension."""

    def _make(
        name: str,
        parent: Folder | None = None,
        extension: str = FILE_EXTENSION,
        content: bytes = FILE_CONTENT,
    ) -> File:
        return File(name, parent, len(content), created_date, content, extension)

    return _make


# ============================================================================
# Manager Fixtures
# ============================================================================


@pytest.fixture
def manager() -> FileSystemManager:
    """Create a manager with an empty root."""
    return FileSystemManager()


@pytest.fixture
def root(manager: FileSystemManager) -> Folder:
    """The manager's root folder."""
    return manager.root


@pytest.fixture
def sub_folder(root: Folder) -> Folder:
    """A folder registered directly under root."""
    return Folder("rootSubFolder", root)


@pytest.fixture
def floating_folder() -> Folder:
    """A folder with no parent, outside any hierarchy."""
    return Folder("newFolder", None)


@pytest.fixture
def external_folder(floating_folder: Folder) -> Folder:
    """A folder whose parent is not part of the root hierarchy."""
    return Folder("externalFolder", floating_folder)
