"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The manager is typed by its Protocol so test doubles can be injected
without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from foldertree.console import TreeConsole
from foldertree.protocols import HierarchyManager
from foldertree.scenario import ScenarioRunner


@dataclass
class AppContext:
    """Container for the objects a CLI command works with.

    A fresh context means a fresh, empty tree: nothing outlives a command.
    """

    manager: HierarchyManager
    runner: ScenarioRunner
    output: TreeConsole = field(default_factory=TreeConsole)


def create_context() -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Returns:
        AppContext wired around a new FileSystemManager.
    """
    from foldertree.manager import FileSystemManager

    manager = FileSystemManager()
    return AppContext(manager=manager, runner=ScenarioRunner(manager))
