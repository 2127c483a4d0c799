"""In-memory hierarchical file system with invariant-checked operations."""

__version__ = "0.1.0"

from foldertree.errors import FolderTreeError, IllegalHierarchyError, InvalidArgumentError
from foldertree.file import File
from foldertree.folder import Folder
from foldertree.manager import FileSystemManager

__all__ = [
    "__version__",
    "File",
    "FileSystemManager",
    "Folder",
    "FolderTreeError",
    "IllegalHierarchyError",
    "InvalidArgumentError",
]
