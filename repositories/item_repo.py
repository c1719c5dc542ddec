"""
repositories/item_repo.py
-------------------------
Data access layer for catalog items.
All SQL queries related to the `items` table live here.
"""

from typing import Optional

import psycopg2

from db.connection import ConnectionConfig, get_connection, release_connection
from models.item import Item
from utils.exceptions import StorageError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, titulo, autor, ano, genero, detalhes"

# Update order is fixed: title, author, year, genre, details.
_UPDATABLE = (
    ("title", "titulo"),
    ("author", "autor"),
    ("year", "ano"),
    ("genre", "genero"),
    ("details", "detalhes"),
)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ItemRepository:
    """Repository for CRUD operations on the items table."""

    def __init__(self, config: ConnectionConfig):
        self.config = config

    # ── CREATE ────────────────────────────────────────────

    def insert(self, item: Item) -> int:
        """
        Insert a new catalog item. The id is assigned by the database.

        Args:
            item: The Item to persist. Its ``id`` is ignored.

        Returns:
            The id assigned to the new row.

        Raises:
            ValidationError: If the item fails Item.validate(). Raised before connecting.
        """
        item.validate()
        sql = """
            INSERT INTO items (titulo, autor, ano, genero, detalhes)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id;
        """
        conn = get_connection(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    item.title, item.author, item.year, item.genre, item.details,
                ))
                new_id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Inserted item #{new_id} '{item.title}'")
            return new_id
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to insert item '{item.title}': {e}")
            raise StorageError(str(e).strip()) from e
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Item]:
        """
        Fetch every item.

        Returns:
            List of Item objects ordered by id ascending (empty if none).
        """
        sql = f"SELECT {_COLUMNS} FROM items ORDER BY id;"
        return self._fetch_all(sql, ())

    def search(self, term: str) -> list[Item]:
        """
        Case-insensitive substring search on title or author.

        Args:
            term: Text to look for. An empty term matches every item.

        Returns:
            Matching Item objects ordered by id ascending.
        """
        sql = (
            f"SELECT {_COLUMNS} FROM items "
            "WHERE LOWER(titulo) LIKE %s OR LOWER(autor) LIKE %s "
            "ORDER BY id;"
        )
        pattern = f"%{_escape_like(term.lower())}%"
        return self._fetch_all(sql, (pattern, pattern))

    def get_by_id(self, item_id: int) -> Optional[Item]:
        """
        Fetch a single item by id.

        Returns:
            An Item object or None if not found.
        """
        sql = f"SELECT {_COLUMNS} FROM items WHERE id = %s;"
        conn = get_connection(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (item_id,))
                row = cur.fetchone()
                return self._row_to_item(row) if row else None
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch item #{item_id}: {e}")
            raise StorageError(str(e).strip()) from e
        finally:
            release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(
        self,
        item_id: int,
        title: Optional[str] = None,
        author: Optional[str] = None,
        year: Optional[int] = None,
        genre: Optional[str] = None,
        details: Optional[str] = None,
    ) -> bool:
        """
        Overwrite only the supplied fields of an item.

        Empty strings and a year of 0 count as "not supplied".

        Returns:
            True if a row was updated, False if no item has that id.

        Raises:
            ValidationError: If no field was supplied. Raised before connecting.
        """
        supplied = {
            "title": title, "author": author, "year": year,
            "genre": genre, "details": details,
        }
        assignments = [
            (column, supplied[field])
            for field, column in _UPDATABLE
            if supplied[field]
        ]
        if not assignments:
            raise ValidationError("No fields supplied for update")

        set_clause = ", ".join(f"{column} = %s" for column, _ in assignments)
        sql = f"UPDATE items SET {set_clause} WHERE id = %s;"
        params = [value for _, value in assignments] + [item_id]

        conn = get_connection(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                updated = cur.rowcount > 0
            conn.commit()
            if updated:
                logger.info(f"Updated item #{item_id}: {[c for c, _ in assignments]}")
            return updated
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to update item #{item_id}: {e}")
            raise StorageError(str(e).strip()) from e
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, item_id: int) -> bool:
        """
        Delete an item by id. A missing id is not an error.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM items WHERE id = %s;"
        conn = get_connection(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (item_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted item #{item_id}")
            return deleted
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to delete item #{item_id}: {e}")
            raise StorageError(str(e).strip()) from e
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_all(self, sql: str, params: tuple) -> list[Item]:
        conn = get_connection(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return [self._row_to_item(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to query items: {e}")
            raise StorageError(str(e).strip()) from e
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_item(row: tuple) -> Item:
        """Convert a database row tuple to an Item domain object."""
        return Item(
            id=row[0],
            title=row[1],
            author=row[2],
            year=row[3],
            genre=row[4],
            details=row[5] or "",
        )
