"""Rich output for folder trees and scenario results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from foldertree.folder import Folder
    from foldertree.types import OperationResult


def build_tree(folder: Folder) -> Tree:
    """Build a rich Tree mirroring a folder and everything below it.

    Sub-folders come first, then files, each in insertion order.

    Args:
        folder: Folder to render.

    Returns:
        A rich Tree ready to print.
    """
    tree = Tree(f"[bold blue]{escape(folder.name)}/[/bold blue]")
    _add_children(tree, folder)
    return tree


def _add_children(node: Tree, folder: Folder) -> None:
    for child in folder.folders:
        branch = node.add(f"[bold blue]{escape(child.name)}/[/bold blue]")
        _add_children(branch, child)
    for file in folder.files:
        node.add(f"{escape(file.full_name)} [dim]({file.size} B)[/dim]")


class TreeConsole:
    """Console output for the foldertree CLI."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the output.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_tree(self, folder: Folder) -> None:
        """Display a folder hierarchy.

        Args:
            folder: Top folder to display.
        """
        self.console.print(build_tree(folder))

    def show_results(self, results: list[OperationResult]) -> None:
        """Display scenario results table.

        Args:
            results: Results in the order the operations were applied.
        """
        if not results:
            self.console.print("[yellow]No operations applied[/yellow]")
            return

        table = Table(title="Operations")
        table.add_column("#", justify="right")
        table.add_column("Operation", style="cyan")
        table.add_column("Target")
        table.add_column("Result")

        for index, result in enumerate(results, start=1):
            if result.success:
                outcome = f"[green]\u2713[/green] {escape(result.location or 'done')}"
            else:
                outcome = f"[red]\u2717 {escape(result.error or '')}[/red]"
            table.add_row(str(index), result.operation, escape(result.target), outcome)

        self.console.print(table)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]\u2713[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]\u2717[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {message}")
