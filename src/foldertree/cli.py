"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
import yaml
from rich.console import Console

from foldertree import __version__
from foldertree.context import create_context
from foldertree.scenario import Scenario

if TYPE_CHECKING:
    from foldertree.context import AppContext

app = typer.Typer(
    name="foldertree",
    help="In-memory folder tree driven by YAML scenarios",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"foldertree v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log every tree mutation")
    ] = False,
) -> None:
    """In-memory folder tree driven by YAML scenarios."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_scenario(ctx: AppContext, scenario_path: Path) -> Scenario:
    """Load a scenario, reporting parse errors and exiting on failure."""
    try:
        return Scenario.from_file(scenario_path)
    except FileNotFoundError as e:
        ctx.output.show_error(str(e))
        raise typer.Exit(1) from e
    except yaml.YAMLError as e:
        ctx.output.show_error(f"Invalid YAML in {scenario_path}: {e}")
        raise typer.Exit(1) from e
    except ValueError as e:
        ctx.output.show_error(f"Invalid scenario {scenario_path}:\n{e}")
        raise typer.Exit(1) from e


@app.command("run")
def run(
    scenario_path: Annotated[Path, typer.Argument(help="Scenario YAML file")],
    fail_fast: Annotated[
        bool, typer.Option("--fail-fast", "-x", help="Stop at the first failed operation")
    ] = False,
    show_tree: Annotated[
        bool, typer.Option("--tree/--no-tree", help="Print the final folder tree")
    ] = True,
    _context=None,
) -> None:
    """Apply a scenario to an empty tree and report each operation."""
    ctx = _context or create_context()
    scenario = _load_scenario(ctx, scenario_path)

    results = ctx.runner.run(scenario, fail_fast=fail_fast)
    ctx.output.show_results(results)
    if show_tree:
        ctx.output.show_tree(ctx.manager.root)

    failed = [r for r in results if not r.success]
    if failed:
        skipped = len(scenario.operations) - len(results)
        if skipped:
            ctx.output.show_warning(f"Skipped {skipped} operation(s) after the first failure")
        ctx.output.show_error(f"{len(failed)} of {len(results)} operation(s) failed")
        raise typer.Exit(1)
    ctx.output.show_success(f"Applied {len(results)} operation(s) from '{scenario.name}'")


@app.command("check")
def check(
    scenario_path: Annotated[Path, typer.Argument(help="Scenario YAML file")],
    _context=None,
) -> None:
    """Validate a scenario file without applying it."""
    ctx = _context or create_context()
    scenario = _load_scenario(ctx, scenario_path)
    ctx.output.show_success(
        f"Scenario '{scenario.name}' is valid ({len(scenario.operations)} operation(s))"
    )


if __name__ == "__main__":
    app()
