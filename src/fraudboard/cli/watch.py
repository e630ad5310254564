# Copyright (c) Syntropy Systems
"""fraudboard watch command - live updating terminal dashboard."""
from __future__ import annotations

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console, Group
from rich.live import Live

from fraudboard.cli.show import build_display, resolve_config
from fraudboard.models.view import DashboardViewModel
from fraudboard.state import DashboardStateMachine

console = Console()


def build_watch_display(view: DashboardViewModel, refreshing: bool) -> Group:
    """Wrap the dashboard with a status footer."""
    now = datetime.now(timezone.utc)
    footer = f"[dim]Last updated: {now.strftime('%H:%M:%S')} (Ctrl+C to exit)[/dim]"
    if refreshing and view.is_terminal:
        footer = "[dim]Refreshing...[/dim]  " + footer
    return Group(build_display(view), footer)


def watch(
    interval: Optional[float] = typer.Option(
        None,
        "--interval", "-i",
        help="Refresh interval in seconds (default: refresh_interval from config)",
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", "-d", help="Directory holding the result artifacts",
    ),
    url: Optional[str] = typer.Option(
        None, "--url", "-u", help="Base URL serving the result artifacts",
    ),
) -> None:
    """Watch the evaluation results with periodic refresh.

    Press Ctrl+C to exit.
    """
    config = resolve_config(data_dir, url)
    period = interval if interval is not None else config.refresh_interval
    machine = DashboardStateMachine.from_config(config)

    console.print("[dim]Starting watch mode...[/dim]")

    try:
        with Live(console=console, refresh_per_second=1, screen=True) as live:
            _ = machine.subscribe(
                lambda view: live.update(build_watch_display(view, refreshing=False))
            )
            live.update(build_watch_display(machine.current, refreshing=True))
            while True:
                _ = machine.refresh_in_background()
                live.update(build_watch_display(machine.current, machine.is_loading))
                time.sleep(period)

    except KeyboardInterrupt:
        console.print("\n[dim]Watch stopped[/dim]")
