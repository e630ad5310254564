# Copyright (c) Syntropy Systems
"""fraudboard init command."""

from pathlib import Path

import typer
from rich.console import Console

from fraudboard.config import CONFIG_DIR_NAME, write_default_config

console = Console()


def init(
    path: Path = typer.Argument(
        Path(),
        help="Directory to initialize (default: current directory)",
    ),
) -> None:
    """Initialize a new fraudboard project.

    Creates a .fraudboard directory with a default config and an empty
    data directory for the result artifacts.
    """
    target = path.resolve()
    config_dir = target / CONFIG_DIR_NAME

    if config_dir.exists():
        console.print(f"[yellow]Already initialized:[/yellow] {config_dir}")
        return

    config_dir.mkdir(parents=True)
    config_path = write_default_config(config_dir)

    data_dir = target / "data"
    data_dir.mkdir(exist_ok=True)

    console.print(f"[green]Initialized fraudboard project:[/green] {config_dir}")
    console.print(f"  [dim]config:[/dim] {config_path}")
    console.print(f"  [dim]data:[/dim] {data_dir}")
