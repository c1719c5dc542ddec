"""
handlers/menu.py
----------------
Interactive menu loop. Each option has its own handler that prompts for
input, delegates to CatalogService / ExportService and prints the result.
A failing operation prints a message and returns to the menu.
"""

from datetime import datetime
from pathlib import Path

from rich.prompt import Confirm, IntPrompt, Prompt

from handlers.console import console, display_error, display_items, display_panel
from services.catalog_service import CatalogService
from services.export_service import ExportService
from utils.exceptions import CatalogError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

MENU_OPTIONS = (
    ("1", "Add item"),
    ("2", "List items"),
    ("3", "Search by title/author"),
    ("4", "Update item"),
    ("5", "Delete item"),
    ("6", "Export catalog (CSV)"),
    ("7", "Export catalog (Excel)"),
    ("0", "Exit"),
)


def add_item(catalog: CatalogService) -> None:
    """Prompt for every field and insert a new item."""
    title = Prompt.ask("Title")
    author = Prompt.ask("Author")
    year = IntPrompt.ask("Year")
    genre = Prompt.ask("Genre")
    details = Prompt.ask("Details", default="")
    try:
        display_panel(catalog.add_item(title, author, year, genre, details))
    except ValidationError as e:
        display_panel(f"ℹ️ Item not added: {e}.", "yellow")
    except CatalogError as e:
        display_error(f"Failed to add item: {e}")


def list_items(catalog: CatalogService) -> None:
    try:
        display_items("Catalog", catalog.list_items())
    except CatalogError as e:
        display_error(f"Failed to list items: {e}")


def search_items(catalog: CatalogService) -> None:
    term = Prompt.ask("Search term (title/author)", default="")
    try:
        display_items(f"Results for '{term}'", catalog.search_items(term))
    except CatalogError as e:
        display_error(f"Failed to search items: {e}")


def update_item(catalog: CatalogService) -> None:
    """
    Show the current item, then ask for new values.
    Blank answers and a year of 0 keep the current value.
    """
    item_id = IntPrompt.ask("ID of the item to update")
    try:
        item = catalog.find_item(item_id)
        if item is None:
            display_panel(f"Item with ID {item_id} not found.", "yellow")
            return

        console.print(f"Current item: [bold]{item.title}[/] ({item.author})")
        title = Prompt.ask("New title (blank to keep)", default="")
        author = Prompt.ask("New author (blank to keep)", default="")
        year = IntPrompt.ask("New year (0 to keep)", default=0)
        genre = Prompt.ask("New genre (blank to keep)", default="")
        details = Prompt.ask("New details (blank to keep)", default="")

        display_panel(catalog.edit_item(item_id, title, author, year, genre, details))
    except CatalogError as e:
        display_error(f"Failed to update item: {e}")


def delete_item(catalog: CatalogService) -> None:
    """Show the item and ask for confirmation before deleting it."""
    item_id = IntPrompt.ask("ID of the item to delete")
    try:
        item = catalog.find_item(item_id)
        if item is None:
            display_panel(f"Item with ID {item_id} not found.", "yellow")
            return

        console.print(f"Item to delete: [bold]{item.title}[/] ({item.author})")
        if not Confirm.ask("Confirm deletion?", default=False):
            display_panel("Deletion cancelled.", "yellow")
            return

        display_panel(catalog.remove_item(item_id))
    except CatalogError as e:
        display_error(f"Failed to delete item: {e}")


def export_items(exporter: ExportService, export_dir: str, fmt: str) -> None:
    """Write the catalog to ``export_dir`` as CSV or Excel."""
    try:
        buffer = exporter.export_excel() if fmt == "xlsx" else exporter.export_csv()
    except (CatalogError, ValueError, ImportError) as e:
        display_error(f"Failed to export catalog: {e}")
        return

    path = Path(export_dir) / f"catalog_{datetime.now():%Y%m%d_%H%M%S}.{fmt}"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(buffer.getvalue())
    except OSError as e:
        logger.error(f"Could not write export file {path}: {e}")
        display_error(f"Could not write {path}: {e}")
        return
    display_panel(f"📄 Catalog exported to {path}")


def run_menu(catalog: CatalogService, exporter: ExportService, export_dir: str) -> None:
    """Show the main menu until the user chooses to exit."""
    actions = {
        "1": lambda: add_item(catalog),
        "2": lambda: list_items(catalog),
        "3": lambda: search_items(catalog),
        "4": lambda: update_item(catalog),
        "5": lambda: delete_item(catalog),
        "6": lambda: export_items(exporter, export_dir, "csv"),
        "7": lambda: export_items(exporter, export_dir, "xlsx"),
    }

    while True:
        console.print("\n[bold cyan]===== Catalog =====[/]")
        for key, label in MENU_OPTIONS:
            console.print(f"{key} - {label}")

        choice = Prompt.ask("Choose", choices=[key for key, _ in MENU_OPTIONS])
        if choice == "0":
            console.print("Exiting...")
            return
        actions[choice]()
