"""
handlers/console.py
-------------------
Shared rich console and display helpers for the menu handlers.
"""

from rich.box import SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from models.item import Item

console = Console()


def display_error(message: str) -> None:
    """Display an error message in a red panel"""
    console.print(
        Panel.fit(f"[bold]❌ Error:[/] {message}", style="red", border_style="red")
    )


def display_panel(message: str, style: str = "green") -> None:
    """Display a message in a styled panel"""
    console.print(Panel.fit(message, style=style, border_style=style))


def display_items(title: str, items: list[Item]) -> None:
    """Display items in a table, or a notice when there are none."""
    if not items:
        display_panel("No items found.", "yellow")
        return

    table = Table(title=title, box=SIMPLE, header_style="bold magenta")
    for col in ("ID", "Title", "Author", "Year", "Genre", "Details"):
        table.add_column(col, style="cyan")
    for item in items:
        table.add_row(
            str(item.id), item.title, item.author, str(item.year),
            item.genre, item.details or "",
        )
    console.print(table)
