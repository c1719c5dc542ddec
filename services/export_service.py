"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of the catalog.
"""

import io

import pandas as pd

from models.item import Item
from repositories.item_repo import ItemRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_HEADERS = ["ID", "Title", "Author", "Year", "Genre", "Details"]


class ExportService:
    """Generates catalog reports in CSV and Excel formats."""

    def __init__(self, repo: ItemRepository):
        self.repo = repo

    def _frame(self, items: list[Item]) -> pd.DataFrame:
        data = [
            {
                "ID": i.id,
                "Title": i.title,
                "Author": i.author,
                "Year": i.year,
                "Genre": i.genre,
                "Details": i.details or "",
            }
            for i in items
        ]
        return pd.DataFrame(data, columns=_HEADERS)

    def export_csv(self) -> io.BytesIO:
        """
        Export the whole catalog as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        items = self.repo.list_all()
        df = self._frame(items)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(items)} items as CSV")
        return buffer

    def export_excel(self) -> io.BytesIO:
        """
        Export the whole catalog as an Excel (.xlsx) file, with a second
        sheet counting items per genre.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        items = self.repo.list_all()
        df = self._frame(items)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Items", index=False)

            if items:
                summary = df.groupby("Genre")["ID"].count().reset_index()
                summary.columns = ["Genre", "Items"]
                summary.to_excel(writer, sheet_name="By genre", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(items)} items as Excel")
        return buffer
