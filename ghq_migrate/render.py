"""Rich UI helpers for terminal output."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import Discovery, Outcome, RelocationPlan, RelocationResult

console = Console()


def info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}", soft_wrap=True)


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}", soft_wrap=True)


def warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}", soft_wrap=True)


def error(message: str) -> None:
    console.print(f"[red]✗[/red] {message}", style="red", soft_wrap=True)


def display_path(path: Path | str) -> str:
    """Printable form of a path whose name may not be valid UTF-8."""

    return str(path).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def show_discovery(discovery: Discovery, workspace_root: Path) -> None:
    """Show the planned moves plus anything that was left out."""

    if discovery.plans:
        table = Table(
            title=f"Repositories to move into {escape(display_path(workspace_root))}",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Source", style="cyan")
        table.add_column("Destination")
        for plan in discovery.plans:
            table.add_row(escape(display_path(plan.source)), escape(display_path(plan.destination)))
        console.print(table)

    for skipped in discovery.skipped:
        warning(f"Skipping {escape(display_path(skipped.path))}: {escape(display_path(skipped.reason))}")

    for plans in discovery.collisions.values():
        sources = ", ".join(escape(display_path(plan.source)) for plan in plans)
        warning(
            f"{len(plans)} repositories map to {escape(plans[0].location.slug)} ({sources}); "
            "at most one of them will be moved."
        )


def show_result(result: RelocationResult) -> None:
    plan = result.plan
    source = escape(display_path(plan.source))
    destination = escape(display_path(plan.destination))
    if result.outcome is Outcome.MOVED:
        success(f"Moved {source} → {destination}")
    elif result.outcome is Outcome.SKIPPED_EXISTS:
        warning(f"Skipped {source}: destination {destination} already exists")
    else:
        reason = escape(display_path(result.reason or "unknown error"))
        error(f"Failed to move {source} → {destination}: {reason}")


def show_summary(results: Sequence[RelocationResult]) -> None:
    counts = Counter(result.outcome for result in results)
    console.print(
        f"\n[bold]Done.[/bold] moved: {counts[Outcome.MOVED]}, "
        f"skipped: {counts[Outcome.SKIPPED_EXISTS]}, "
        f"failed: {counts[Outcome.FAILED]}"
    )


def plan_to_dict(plan: RelocationPlan) -> dict[str, Any]:
    return {
        "source": str(plan.source),
        "destination": str(plan.destination),
        "remote_url": plan.remote_url,
        "host": plan.location.host,
        "owner": plan.location.owner,
        "name": plan.location.name,
    }


def discovery_to_dict(discovery: Discovery) -> dict[str, Any]:
    return {
        "plans": [plan_to_dict(plan) for plan in discovery.plans],
        "skipped": [{"path": str(item.path), "reason": item.reason} for item in discovery.skipped],
    }


def results_to_dict(discovery: Discovery, results: Sequence[RelocationResult]) -> dict[str, Any]:
    payload = discovery_to_dict(discovery)
    payload["results"] = [
        {
            **plan_to_dict(result.plan),
            "outcome": result.outcome.value,
            "reason": result.reason,
        }
        for result in results
    ]
    return payload


__all__ = [
    "console",
    "display_path",
    "info",
    "success",
    "warning",
    "error",
    "show_discovery",
    "show_result",
    "show_summary",
    "plan_to_dict",
    "discovery_to_dict",
    "results_to_dict",
]
