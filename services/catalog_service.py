"""
services/catalog_service.py
---------------------------
Business logic for managing the catalog.
Sits between the menu handlers and the ItemRepository and turns
repository results into user-facing messages.
"""

from typing import Optional

from models.item import Item
from repositories.item_repo import ItemRepository
from utils.exceptions import ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Handles all catalog operations requested from the CLI."""

    def __init__(self, repo: ItemRepository):
        self.repo = repo

    def add_item(self, title: str, author: str, year: int,
                 genre: str, details: str = "") -> str:
        """
        Persist a new item.

        Returns:
            Confirmation message including the assigned id.

        Raises:
            ValidationError: If a required field is blank or the year is out
                of range. Nothing is written.
        """
        item = Item(title=title, author=author, year=year, genre=genre, details=details)
        new_id = self.repo.insert(item)
        return f"✅ Item #{new_id} added to the catalog."

    def list_items(self) -> list[Item]:
        return self.repo.list_all()

    def search_items(self, term: str) -> list[Item]:
        return self.repo.search(term)

    def find_item(self, item_id: int) -> Optional[Item]:
        return self.repo.get_by_id(item_id)

    def edit_item(self, item_id: int, title: str = "", author: str = "",
                  year: int = 0, genre: str = "", details: str = "") -> str:
        """
        Apply a partial update. Blank strings and a year of 0 keep the
        current value.

        Returns:
            User-friendly confirmation or notice message.
        """
        try:
            updated = self.repo.update(
                item_id,
                title=title or None,
                author=author or None,
                year=year or None,
                genre=genre or None,
                details=details or None,
            )
        except ValidationError:
            return "ℹ️ Nothing to update: every field was left blank."

        if updated:
            return f"✏️ Item #{item_id} updated."
        return f"⚠️ Item #{item_id} not found."

    def remove_item(self, item_id: int) -> str:
        """
        Delete an item by id.

        Returns:
            User-friendly message confirming deletion or absence.
        """
        if self.repo.delete(item_id):
            return f"🗑️ Item #{item_id} deleted."
        return f"⚠️ Item #{item_id} not found."
