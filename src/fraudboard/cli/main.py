# Copyright (c) Syntropy Systems
"""Main CLI entry point for fraudboard."""

import typer

from fraudboard.cli.dashboard import dashboard
from fraudboard.cli.init_cmd import init
from fraudboard.cli.show import show
from fraudboard.cli.watch import watch

app = typer.Typer(
    name="fraudboard",
    help="Fraud model evaluation dashboard. Precision, recall and the PR curve at a glance.",
    no_args_is_help=True,
    add_completion=False,
)

# Register commands
_ = app.command()(init)
_ = app.command()(show)
_ = app.command()(watch)
_ = app.command()(dashboard)


if __name__ == "__main__":
    app()
