"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table


console = Console()


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_table(title: str, rows: list[tuple[str, str]]) -> None:
    """
    Print label/value pairs in a two-column table.

    Args:
        title: Table title
        rows: (label, value) pairs, in display order
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", style="green")

    for label, value in rows:
        table.add_row(label, value)

    console.print(table)


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))
