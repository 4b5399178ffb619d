"""
nextdeck-widget CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from rich.console import Console

from nextdeck_widget import __version__
from nextdeck_widget.cli import widget
from nextdeck_widget.core.config.env import load_layered_env

app = typer.Typer(
    name="nextdeck-widget",
    help="Preview NextDeck home and lock screen widgets",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    nextdeck-widget - preview NextDeck widgets from the shared snapshot.

    Quick Start:
        nextdeck-widget status          # Is there a snapshot?
        nextdeck-widget boards          # Boards the picker offers
        nextdeck-widget show board      # Preview the board widget
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()

    if debug:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Debug mode enabled[/dim]")

    ctx.obj = {"debug": debug}


app.command(name="show")(widget.show)
app.command(name="boards")(widget.boards)
app.command(name="status")(widget.status)
app.command(name="link")(widget.link)


@app.command()
def version() -> None:
    """Show nextdeck-widget version."""
    console.print(f"nextdeck-widget version {__version__}")


__all__ = ["app"]
