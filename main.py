"""
main.py
-------
Entry point for the catalog CLI.

Responsibilities:
    - Build the connection descriptor from DATABASE_URL (fail early if absent).
    - Wire the repository and services together.
    - Run the interactive menu loop.
"""

import sys

from config import (
    DATABASE_URL,
    DB_CONNECT_TIMEOUT,
    DB_STATEMENT_TIMEOUT_MS,
    EXPORT_DIR,
    LOG_LEVEL,
)
from db.connection import build_connection_config
from handlers.menu import run_menu
from repositories.item_repo import ItemRepository
from services.catalog_service import CatalogService
from services.export_service import ExportService
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    """Initialize and run the catalog menu. Returns the process exit code."""
    configure_logging(LOG_LEVEL)

    # ── 1. Connection descriptor ──────────────────────────
    db_config = build_connection_config(
        DATABASE_URL,
        connect_timeout=DB_CONNECT_TIMEOUT,
        statement_timeout_ms=DB_STATEMENT_TIMEOUT_MS,
    )
    if not db_config.is_configured:
        print("ERROR: DATABASE_URL is not configured!", file=sys.stderr)
        return 1

    # ── 2. Wire layers ────────────────────────────────────
    repo = ItemRepository(db_config)
    catalog = CatalogService(repo)
    exporter = ExportService(repo)

    # ── 3. Menu loop ──────────────────────────────────────
    logger.info("Catalog CLI started.")
    try:
        run_menu(catalog, exporter, EXPORT_DIR)
    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled by user")
    logger.info("Catalog CLI stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
