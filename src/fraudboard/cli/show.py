# Copyright (c) Syntropy Systems
"""fraudboard show command - one load cycle, printed."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from fraudboard.config import FallbackPolicy, FraudboardConfig, load_config
from fraudboard.models.view import DashboardStatus, DashboardViewModel
from fraudboard.presentation import STATUS_STYLES, sample_points, stat_cards
from fraudboard.state import DashboardStateMachine

console = Console()

MAX_CURVE_ROWS = 11


def resolve_config(
    data_dir: Path | None = None,
    url: str | None = None,
    *,
    strict: bool = False,
) -> FraudboardConfig:
    """Load config and apply command line overrides.

    Exits with code 1 if the config file cannot be used.
    """
    try:
        config = load_config()
    except (RuntimeError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if data_dir is not None:
        config.data_dir = data_dir.resolve()
        config.base_url = None
    if url is not None:
        config.base_url = url
    if strict:
        config.fallback_policy = FallbackPolicy.STRICT
    return config


def build_cards_table(view: DashboardViewModel) -> Table:
    """Build the summary statistics row."""
    table = Table(show_header=True, header_style="bold", expand=False)
    if view.metrics is None:
        table.add_column("Metrics")
        table.add_row("[dim]-[/dim]")
        return table

    cards = stat_cards(view.metrics)
    for card in cards:
        table.add_column(card.title, justify="center")
    table.add_row(*[f"[bold]{card.value}[/bold]" for card in cards])
    return table


def build_curve_table(view: DashboardViewModel, max_rows: int = MAX_CURVE_ROWS) -> Table:
    """Build the precision-recall curve table, downsampled to max_rows."""
    curve = view.curve or ()
    title = "Precision-Recall Curve"
    if len(curve) > max_rows:
        title += f" [dim]({max_rows} of {len(curve)} points)[/dim]"

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Recall", justify="right", width=8)
    table.add_column("Precision", justify="right", width=10)

    if not curve:
        table.add_row("-", "[dim]No curve[/dim]")
        return table

    for point in sample_points(curve, max_rows):
        table.add_row(f"{point.recall:.3f}", f"{point.precision:.3f}")
    return table


def build_display(view: DashboardViewModel) -> Group:
    """Build the full terminal rendering of a view model."""
    style = STATUS_STYLES[view.status]
    parts: list[object] = [
        f"[bold]Model Performance Overview[/bold]  [{style}]{view.status.value}[/{style}]",
    ]

    if view.status is DashboardStatus.LOADING:
        parts.append("[dim]Loading results...[/dim]")
        return Group(*parts)

    if view.status is DashboardStatus.FAILED:
        parts.append(Panel(view.error or "", title="Error", border_style="red"))
        return Group(*parts)

    if view.warning:
        parts.append(
            Panel(
                f"{view.warning}\n[dim]Showing placeholder data.[/dim]",
                title="Warning",
                border_style="yellow",
            )
        )
    parts.append(build_cards_table(view))
    parts.append(build_curve_table(view))
    return Group(*parts)


def show(
    json_output: bool = typer.Option(
        False, "--json", help="Print the view model as JSON",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail instead of showing placeholder data",
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", "-d", help="Directory holding the result artifacts",
    ),
    url: Optional[str] = typer.Option(
        None, "--url", "-u", help="Base URL serving the result artifacts",
    ),
) -> None:
    """Load the evaluation results once and print them."""
    config = resolve_config(data_dir, url, strict=strict)
    machine = DashboardStateMachine.from_config(config)
    view = machine.load()

    if json_output:
        console.print_json(view.model_dump_json())
    else:
        console.print(build_display(view))

    if view.status is DashboardStatus.FAILED:
        raise typer.Exit(1)
