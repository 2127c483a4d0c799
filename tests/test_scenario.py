"""Tests for scenario module."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from foldertree.manager import FileSystemManager
from foldertree.scenario import Scenario, ScenarioOperation, ScenarioRunner

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

SAMPLE_SCENARIO = """
name: reorganize
description: Move reports into the archive
operations:
  - op: create_folder
    name: docs
  - op: create_folder
    name: archive
  - op: create_file
    name: report
    extension: txt
    content: quarterly numbers
    parent: docs
  - op: move_file
    path: docs/report.txt
    destination: archive
  - op: rename_file
    path: archive/report.txt
    newName: report-2024
"""


@pytest.fixture
def runner(manager: FileSystemManager) -> ScenarioRunner:
    """Create a runner with a fixed clock."""
    return ScenarioRunner(manager, clock=lambda: FIXED_NOW)


class TestScenarioOperation:
    """Tests for ScenarioOperation model."""

    def test_minimal_create_folder(self) -> None:
        """create_folder only needs a name."""
        operation = ScenarioOperation(op="create_folder", name="docs")
        assert operation.parent is None
        assert operation.target == "docs"

    def test_target_with_parent(self) -> None:
        """Target joins parent and name for create operations."""
        operation = ScenarioOperation(op="create_file", name="a", parent="docs/")
        assert operation.target == "docs/a"

    def test_target_prefers_path(self) -> None:
        """Target is the path for operations on existing entries."""
        operation = ScenarioOperation(op="delete_file", path="docs/a.txt")
        assert operation.target == "docs/a.txt"

    def test_aliases(self) -> None:
        """camelCase keys map onto the snake_case fields."""
        operation = ScenarioOperation.model_validate(
            {"op": "rename_folder", "path": "docs", "newName": "papers"}
        )
        assert operation.new_name == "papers"

    @pytest.mark.parametrize(
        "data, missing",
        [
            ({"op": "create_file"}, "name"),
            ({"op": "copy_file", "path": "a.txt"}, "destination"),
            ({"op": "rename_folder", "path": "docs"}, "new_name"),
        ],
    )
    def test_missing_required_field(self, data: dict, missing: str) -> None:
        """Each operation kind enforces its required fields."""
        with pytest.raises(ValidationError, match=missing):
            ScenarioOperation.model_validate(data)

    def test_unknown_op_rejected(self) -> None:
        """Only known operation kinds are accepted."""
        with pytest.raises(ValidationError):
            ScenarioOperation.model_validate({"op": "symlink", "path": "a"})

    def test_unknown_field_rejected(self) -> None:
        """Typos in field names are reported."""
        with pytest.raises(ValidationError):
            ScenarioOperation.model_validate({"op": "create_folder", "name": "a", "parnt": "b"})


class TestScenario:
    """Tests for Scenario loading."""

    def test_from_yaml(self) -> None:
        """YAML text parses into ordered operations."""
        scenario = Scenario.from_yaml(SAMPLE_SCENARIO)
        assert scenario.name == "reorganize"
        assert [o.op for o in scenario.operations] == [
            "create_folder",
            "create_folder",
            "create_file",
            "move_file",
            "rename_file",
        ]

    def test_empty_document(self) -> None:
        """An empty document is an empty scenario."""
        scenario = Scenario.from_yaml("")
        assert scenario.operations == []
        assert scenario.name == "scenario"

    def test_from_file(self, tmp_path: Path) -> None:
        """Scenarios load from disk."""
        path = tmp_path / "scenario.yaml"
        path.write_text(SAMPLE_SCENARIO)
        assert len(Scenario.from_file(path).operations) == 5

    def test_from_file_not_found(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Scenario file not found"):
            Scenario.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self) -> None:
        """Malformed YAML raises YAMLError."""
        with pytest.raises(yaml.YAMLError):
            Scenario.from_yaml("operations: [unclosed")


class TestScenarioRunner:
    """Tests for ScenarioRunner."""

    def test_run_sample(self, runner: ScenarioRunner, manager: FileSystemManager) -> None:
        """The sample scenario applies cleanly."""
        results = runner.run(Scenario.from_yaml(SAMPLE_SCENARIO))

        assert all(r.success for r in results)
        assert results[2].location == "root/docs/report.txt"
        assert results[3].location == "root/archive/report.txt"
        assert results[4].location == "root/archive/report-2024.txt"
        assert manager.find_folder("docs").files == ()
        report = manager.find_file("archive/report-2024.txt")
        assert report.content == b"quarterly numbers"
        assert report.size == len(b"quarterly numbers")

    def test_create_file_uses_clock(
        self, runner: ScenarioRunner, manager: FileSystemManager
    ) -> None:
        """Files without createdAt are stamped by the runner's clock."""
        runner.apply(ScenarioOperation(op="create_file", name="a", extension="txt"))
        assert manager.find_file("a.txt").created_date == FIXED_NOW

    def test_create_file_explicit_size_and_date(
        self, runner: ScenarioRunner, manager: FileSystemManager
    ) -> None:
        """Explicit size and createdAt are passed through."""
        runner.apply(
            ScenarioOperation.model_validate(
                {
                    "op": "create_file",
                    "name": "big",
                    "extension": "bin",
                    "size": 4096,
                    "createdAt": "2020-06-01T12:00:00+00:00",
                }
            )
        )
        big = manager.find_file("big.bin")
        assert big.size == 4096
        assert big.created_date == datetime(2020, 6, 1, 12, tzinfo=timezone.utc)

    def test_failure_becomes_result(self, runner: ScenarioRunner) -> None:
        """Tree errors are reported instead of raised."""
        runner.apply(ScenarioOperation(op="create_folder", name="docs"))
        result = runner.apply(ScenarioOperation(op="create_folder", name="DOCS"))
        assert result.success is False
        assert result.error == "A folder with the same name already exists in the target folder."
        assert result.location is None

    def test_unknown_parent_path_fails(self, runner: ScenarioRunner) -> None:
        """A create under a missing folder fails cleanly."""
        result = runner.apply(ScenarioOperation(op="create_file", name="a", parent="nowhere"))
        assert result.success is False
        assert "No folder at path 'nowhere'" in result.error

    def test_blank_name_fails(self, runner: ScenarioRunner) -> None:
        """Blank names are reported as failures."""
        result = runner.apply(ScenarioOperation(op="create_folder", name=" "))
        assert result.success is False
        assert result.error == "Name cannot be None or empty."

    def test_move_root_fails(self, runner: ScenarioRunner, manager: FileSystemManager) -> None:
        """Moving root is reported as a failure and leaves root in place."""
        runner.apply(ScenarioOperation(op="create_folder", name="docs"))
        result = runner.apply(ScenarioOperation(op="move_folder", path="/", destination="docs"))
        assert result.success is False
        assert result.error == "Illegal operation: Cannot move a folder into its subfolder."
        assert manager.root.parent is None

    def test_continue_after_failure(self, runner: ScenarioRunner) -> None:
        """Without fail_fast every operation is attempted."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="delete_file", path="ghost.txt"),
                ScenarioOperation(op="create_folder", name="docs"),
            ]
        )
        results = runner.run(scenario)
        assert [r.success for r in results] == [False, True]

    def test_fail_fast(self, runner: ScenarioRunner) -> None:
        """With fail_fast the run stops at the first failure."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="delete_file", path="ghost.txt"),
                ScenarioOperation(op="create_folder", name="docs"),
            ]
        )
        results = runner.run(scenario, fail_fast=True)
        assert len(results) == 1

    def test_copy_and_delete_folder(
        self, runner: ScenarioRunner, manager: FileSystemManager
    ) -> None:
        """Folder copy and delete operations go through the manager."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="create_folder", name="docs"),
                ScenarioOperation(op="create_folder", name="backup"),
                ScenarioOperation(op="copy_folder", path="docs", destination="backup"),
                ScenarioOperation(op="delete_folder", path="docs"),
            ]
        )
        results = runner.run(scenario)
        assert all(r.success for r in results)
        assert results[2].location == "root/backup/docs"
        assert results[3].location is None
        assert [f.name for f in manager.root.folders] == ["backup"]

    def test_copy_file_and_rename_folder(
        self, runner: ScenarioRunner, manager: FileSystemManager
    ) -> None:
        """File copies and folder renames are applied in order."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="create_folder", name="docs"),
                ScenarioOperation(op="create_file", name="a", extension="md"),
                ScenarioOperation(op="copy_file", path="a.md", destination="docs"),
                ScenarioOperation(op="rename_folder", path="docs", new_name="papers"),
            ]
        )
        results = runner.run(scenario)
        assert all(r.success for r in results)
        assert manager.find_file("papers/a.md").name == "a"
        assert manager.find_file("a.md") is not manager.find_file("papers/a.md")

    def test_move_folder(self, runner: ScenarioRunner, manager: FileSystemManager) -> None:
        """Folder moves relocate the folder."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="create_folder", name="docs"),
                ScenarioOperation(op="create_folder", name="archive"),
                ScenarioOperation(op="move_folder", path="docs", destination="archive"),
            ]
        )
        results = runner.run(scenario)
        assert results[-1].location == "root/archive/docs"
        assert [f.name for f in manager.root.folders] == ["archive"]

    def test_rename_after_move_folder_checks_siblings(
        self, runner: ScenarioRunner, manager: FileSystemManager
    ) -> None:
        """Renaming a file inside a moved folder still rejects sibling clashes."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="create_folder", name="a"),
                ScenarioOperation(op="create_folder", name="b"),
                ScenarioOperation(op="create_file", name="x", parent="a", extension="txt"),
                ScenarioOperation(op="create_file", name="y", parent="a", extension="txt"),
                ScenarioOperation(op="move_folder", path="a", destination="b"),
                ScenarioOperation(op="rename_file", path="b/a/x.txt", new_name="y"),
            ]
        )
        results = runner.run(scenario)

        assert all(r.success for r in results[:-1])
        assert results[-1].success is False
        assert results[-1].error == (
            'A file with the name "y" and extension "txt" already exists in the parent folder.'
        )
        assert [f.name for f in manager.find_folder("b/a").files] == ["x", "y"]

    def test_delete_file_inside_moved_folder(
        self, runner: ScenarioRunner, manager: FileSystemManager
    ) -> None:
        """Deleting a moved folder's child reports success against its original folder."""
        scenario = Scenario(
            operations=[
                ScenarioOperation(op="create_folder", name="a"),
                ScenarioOperation(op="create_folder", name="b"),
                ScenarioOperation(op="create_file", name="x", parent="a", extension="txt"),
                ScenarioOperation(op="move_folder", path="a", destination="b"),
                ScenarioOperation(op="delete_file", path="b/a/x.txt"),
            ]
        )
        results = runner.run(scenario)

        assert all(r.success for r in results)
        assert [f.name for f in manager.find_folder("b/a").files] == ["x"]
