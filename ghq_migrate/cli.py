"""Typer CLI entrypoint for ghq-migrate."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from . import __version__, render
from .config import resolve_scan_root, resolve_workspace_root
from .exceptions import GhqMigrateError, UserAbort
from .git import require_git
from .interactive import confirm
from .logs import configure_logging
from .models import Discovery, RelocationResult
from .planner import build_plan
from .relocate import execute_plan
from .scanner import scan

app = typer.Typer(
    add_completion=False,
    help="Move scattered git clones into a ghq-style <root>/<host>/<owner>/<name> layout.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ghq-migrate {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Path = typer.Argument(..., help="Directory to search for git repositories."),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Workspace root to move repositories into (defaults to $GHQ_ROOT, then ~/ghq).",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Show the plan without moving anything."),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Number of repositories to inspect in parallel."),
    json_: bool = typer.Option(False, "--json", help="Print the plan and results as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the ghq-migrate version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    render.console.quiet = json_
    try:
        require_git()
        workspace_root = resolve_workspace_root(root)
        scan_root = resolve_scan_root(directory)
    except GhqMigrateError as exc:
        _fail(str(exc))

    render.info(f"Searching for Git repositories in {escape(render.display_path(scan_root))}")
    discovery = build_plan(scan(scan_root), workspace_root, jobs=jobs)
    render.show_discovery(discovery, workspace_root)
    if not discovery.plans:
        render.warning("No Git repositories to move." if discovery.skipped else "No Git repositories found.")
        _emit_json(json_, discovery, [])
        return

    if dry_run:
        render.info("Dry run: no repositories were moved.")
        _emit_json(json_, discovery, [])
        return

    count = len(discovery.plans)
    noun = "repository" if count == 1 else "repositories"
    if not yes and not _confirm(f"Move {count} {noun} into {render.display_path(workspace_root)}?"):
        render.info("Operation cancelled.")
        _emit_json(json_, discovery, [])
        return

    results: list[RelocationResult] = []
    try:
        execute_plan(discovery.plans, on_result=lambda result: _record(results, result))
    except KeyboardInterrupt as exc:
        render.warning("Interrupted; remaining repositories were not moved.")
        render.show_summary(results)
        _emit_json(json_, discovery, results)
        raise typer.Exit(130) from exc
    render.show_summary(results)
    _emit_json(json_, discovery, results)


def _confirm(message: str) -> bool:
    try:
        return confirm(message)
    except UserAbort:
        return False


def _record(results: list[RelocationResult], result: RelocationResult) -> None:
    results.append(result)
    render.show_result(result)


def _emit_json(enabled: bool, discovery: Discovery, results: list[RelocationResult]) -> None:
    if enabled:
        typer.echo(json.dumps(render.results_to_dict(discovery, results), indent=2))


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


__all__ = ["app"]


if __name__ == "__main__":
    app()
