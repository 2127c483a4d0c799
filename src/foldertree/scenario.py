"""Scripted scenarios: YAML operation lists applied to a file system manager."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from foldertree.errors import FolderTreeError
from foldertree.file import File
from foldertree.folder import Folder
from foldertree.protocols import HierarchyManager, TreeEntity
from foldertree.types import OperationResult

logger = logging.getLogger(__name__)

OperationKind = Literal[
    "create_folder",
    "create_file",
    "delete_folder",
    "delete_file",
    "copy_folder",
    "copy_file",
    "move_folder",
    "move_file",
    "rename_folder",
    "rename_file",
]

# Fields each operation kind must set, beyond ``op``
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "create_folder": ("name",),
    "create_file": ("name",),
    "delete_folder": ("path",),
    "delete_file": ("path",),
    "copy_folder": ("path", "destination"),
    "copy_file": ("path", "destination"),
    "move_folder": ("path", "destination"),
    "move_file": ("path", "destination"),
    "rename_folder": ("path", "new_name"),
    "rename_file": ("path", "new_name"),
}


class ScenarioOperation(BaseModel):
    """A single step of a scenario."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    op: OperationKind
    name: str | None = None
    parent: str | None = None
    extension: str = ""
    content: str = ""
    size: int | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")
    path: str | None = None
    destination: str | None = None
    new_name: str | None = Field(default=None, alias="newName")

    @model_validator(mode="after")
    def check_required_fields(self) -> ScenarioOperation:
        missing = [f for f in REQUIRED_FIELDS[self.op] if getattr(self, f) is None]
        if missing:
            raise ValueError(f"'{self.op}' requires: {', '.join(missing)}")
        return self

    @property
    def target(self) -> str:
        """Path or name this operation acts on, for reporting."""
        if self.path is not None:
            return self.path
        if self.parent:
            return f"{self.parent.rstrip('/')}/{self.name}"
        return self.name or ""


class Scenario(BaseModel):
    """An ordered list of operations loaded from YAML."""

    name: str = "scenario"
    description: str = ""
    operations: list[ScenarioOperation] = Field(default_factory=list)

    @classmethod
    def from_file(cls, path: Path) -> Scenario:
        """Load a scenario from a YAML file.

        Args:
            path: Path to the scenario file.

        Returns:
            Parsed Scenario.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If the file is not valid YAML.
            ValueError: If the document does not describe a valid scenario.
        """
        if not path.exists():
            raise FileNotFoundError(f"Scenario file not found: {path}")

        return cls.from_yaml(path.read_text())

    @classmethod
    def from_yaml(cls, text: str) -> Scenario:
        """Parse a scenario from YAML text."""
        data = yaml.safe_load(text) or {}
        return cls.model_validate(data)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScenarioRunner:
    """Applies scenario operations to a manager, one result per operation."""

    def __init__(
        self,
        manager: HierarchyManager,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            manager: File system manager the operations are applied to.
            clock: Source of creation timestamps for files without ``createdAt``.
        """
        self.manager = manager
        self.clock = clock or _utc_now
        self._handlers: dict[str, Callable[[ScenarioOperation], str | None]] = {
            "create_folder": self._create_folder,
            "create_file": self._create_file,
            "delete_folder": self._delete_folder,
            "delete_file": self._delete_file,
            "copy_folder": self._copy_folder,
            "copy_file": self._copy_file,
            "move_folder": self._move_folder,
            "move_file": self._move_file,
            "rename_folder": self._rename_folder,
            "rename_file": self._rename_file,
        }

    def run(self, scenario: Scenario, fail_fast: bool = False) -> list[OperationResult]:
        """Apply every operation of a scenario in order.

        Args:
            scenario: The scenario to apply.
            fail_fast: Stop after the first failed operation.

        Returns:
            Results for the operations that were attempted.
        """
        results: list[OperationResult] = []
        for operation in scenario.operations:
            result = self.apply(operation)
            results.append(result)
            if fail_fast and not result.success:
                break
        return results

    def apply(self, operation: ScenarioOperation) -> OperationResult:
        """Apply one operation, turning tree errors into a failed result."""
        try:
            location = self._handlers[operation.op](operation)
        except FolderTreeError as e:
            logger.debug("Operation %s on '%s' rejected: %s", operation.op, operation.target, e)
            return OperationResult(
                success=False,
                operation=operation.op,
                target=operation.target,
                error=str(e),
            )
        return OperationResult(
            success=True,
            operation=operation.op,
            target=operation.target,
            location=location,
        )

    def _parent_of(self, operation: ScenarioOperation) -> Folder | None:
        if operation.parent is None:
            return None
        return self.manager.find_folder(operation.parent)

    def _create_folder(self, operation: ScenarioOperation) -> str:
        folder = Folder(operation.name)
        folder.reparent(self._parent_of(operation))
        return self.manager.create_folder(folder).path

    def _create_file(self, operation: ScenarioOperation) -> str:
        content = operation.content.encode("utf-8")
        size = operation.size if operation.size is not None else len(content)
        file = File(
            operation.name,
            None,
            size,
            operation.created_at or self.clock(),
            content,
            operation.extension,
        )
        file.reparent(self._parent_of(operation))
        return self.manager.create_file(file).path

    def _delete_folder(self, operation: ScenarioOperation) -> None:
        self.manager.delete_folder(self.manager.find_folder(operation.path))

    def _delete_file(self, operation: ScenarioOperation) -> None:
        self.manager.delete_file(self.manager.find_file(operation.path))

    def _copy_folder(self, operation: ScenarioOperation) -> str:
        source = self.manager.find_folder(operation.path)
        destination = self.manager.find_folder(operation.destination)
        return self.manager.copy_folder(source, destination).path

    def _copy_file(self, operation: ScenarioOperation) -> str:
        source = self.manager.find_file(operation.path)
        destination = self.manager.find_folder(operation.destination)
        return self.manager.copy_file(source, destination).path

    def _move_folder(self, operation: ScenarioOperation) -> str:
        source = self.manager.find_folder(operation.path)
        destination = self.manager.find_folder(operation.destination)
        return self.manager.move_folder(source, destination).path

    def _move_file(self, operation: ScenarioOperation) -> str:
        source = self.manager.find_file(operation.path)
        destination = self.manager.find_folder(operation.destination)
        return self.manager.move_file(source, destination).path

    def _rename_folder(self, operation: ScenarioOperation) -> str:
        return _rename(self.manager.find_folder(operation.path), operation.new_name)

    def _rename_file(self, operation: ScenarioOperation) -> str:
        return _rename(self.manager.find_file(operation.path), operation.new_name)


def _rename(entity: TreeEntity, new_name: str) -> str:
    """Rename a file or folder in place and return its new path."""
    entity.rename(new_name)
    return entity.path
