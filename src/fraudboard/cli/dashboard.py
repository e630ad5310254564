# Copyright (c) Syntropy Systems
"""Dashboard command - start the web UI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fraudboard.cli.show import resolve_config

console = Console()


def dashboard(
    port: int = typer.Option(8266, "--port", "-p", help="Port to run the dashboard on"),
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to"),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", "-d", help="Directory holding the result artifacts",
    ),
    url: Optional[str] = typer.Option(
        None, "--url", "-u", help="Base URL serving the result artifacts",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail instead of showing placeholder data",
    ),
) -> None:
    """Start the fraudboard dashboard web UI."""
    try:
        import uvicorn

        from fraudboard.dashboard import create_app
    except ImportError as e:
        error_message = "[red]Dashboard dependencies not installed.[/red]"
        install_message = "Install with: [cyan]pip install fraudboard[dashboard][/cyan]"
        console.print(f"{error_message}\n{install_message}")
        raise typer.Exit(1) from e

    config = resolve_config(data_dir, url, strict=strict)
    source = config.base_url or str(config.data_dir)

    console.print("[bold]fraudboard dashboard[/bold]")
    console.print(f"  Results: [cyan]{source}[/cyan]")
    console.print(f"  Dashboard: [cyan]http://{host}:{port}[/cyan]")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        create_app(config=config),
        host=host,
        port=port,
        log_level="warning",
    )
