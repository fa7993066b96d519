"""
skyframe CLI - Main Application

This is the main entry point for the skyframe command-line interface.
"""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from skyframe.cli.commands import convert, time
from skyframe.cli.utils.groups import SortedCommandsGroup
from skyframe.cli.utils.state import set_location


# Create main app
app = typer.Typer(
    name="skyframe",
    help="Celestial coordinate and time conversions",
    add_completion=False,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

app.add_typer(convert.app, name="convert", rich_help_panel="Coordinates")
app.add_typer(time.app, name="time", rich_help_panel="Time")

# Console for rich output
console = Console()


@app.callback()
def main(
    latitude: float | None = typer.Option(
        None,
        "--latitude",
        "--lat",
        help="Observer latitude in degrees (positive north)",
        envvar="SKYFRAME_LATITUDE",
    ),
    longitude: float | None = typer.Option(
        None,
        "--longitude",
        "--lon",
        help="Observer longitude in degrees (positive east)",
        envvar="SKYFRAME_LONGITUDE",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    skyframe - Celestial Coordinate CLI

    Convert between equatorial and horizontal coordinates and compute
    Julian Dates and sidereal time.

    [bold green]Examples:[/bold green]

        skyframe --lat 37.5665 --lon 126.978 convert to-horizontal --ra 37.95 --dec 89.26
        skyframe time julian --time 2000-01-01T12:00:00Z

    [bold blue]Environment Variables:[/bold blue]

        SKYFRAME_LATITUDE  - Default observer latitude
        SKYFRAME_LONGITUDE - Default observer longitude
    """
    set_location(latitude, longitude)

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")
        if latitude is not None and longitude is not None:
            console.print(f"[dim]Using location: {latitude}, {longitude}[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from skyframe import __version__

    console.print(f"[bold]skyframe[/bold] version [cyan]{__version__}[/cyan]")


def run() -> None:
    """Console script entry point; loads .env before options are read."""
    load_dotenv()
    app()


if __name__ == "__main__":
    run()
