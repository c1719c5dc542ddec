"""
db/connection.py
----------------
Builds the connection descriptor and hands out one connection per operation.
Each repository call opens its own psycopg2 connection and releases it in a
``finally`` block; there is no pooling.
"""

from dataclasses import dataclass
from typing import Optional

import psycopg2

from db.url import normalize_database_url
from utils.exceptions import ConfigurationError, StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConnectionConfig:
    """
    Immutable, driver-ready connection settings.

    Attributes:
        dsn: Normalized libpq URI, or None when no URL was supplied.
        connect_timeout: Seconds to wait for the server to accept a connection.
        statement_timeout_ms: Server-side limit for a single statement.
    """
    dsn: Optional[str]
    connect_timeout: int = 5
    statement_timeout_ms: int = 30000

    @property
    def is_configured(self) -> bool:
        return self.dsn is not None


def build_connection_config(
    url: Optional[str],
    connect_timeout: int = 5,
    statement_timeout_ms: int = 30000,
) -> ConnectionConfig:
    """
    Derive a ConnectionConfig from a database URL.

    Args:
        url: The raw database URL. ``None`` or blank means "not configured".
        connect_timeout: Connection timeout in seconds.
        statement_timeout_ms: Statement timeout in milliseconds.

    Returns:
        A ConnectionConfig; check ``is_configured`` to detect an absent URL.
    """
    if url is None or not url.strip():
        return ConnectionConfig(None, connect_timeout, statement_timeout_ms)
    return ConnectionConfig(
        normalize_database_url(url.strip()), connect_timeout, statement_timeout_ms
    )


def get_connection(config: ConnectionConfig):
    """
    Open a new connection.

    Args:
        config: The connection descriptor.

    Returns:
        A psycopg2 connection object.

    Raises:
        ConfigurationError: If no database URL was configured.
        StorageError: If the database is unreachable.
    """
    if not config.is_configured:
        raise ConfigurationError("DATABASE_URL is not configured!")
    try:
        return psycopg2.connect(
            config.dsn,
            connect_timeout=config.connect_timeout,
            options=f"-c statement_timeout={config.statement_timeout_ms}",
        )
    except psycopg2.Error as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise StorageError(str(e).strip()) from e


def release_connection(conn) -> None:
    """
    Close a connection obtained from get_connection().

    Args:
        conn: The psycopg2 connection to release.
    """
    try:
        conn.close()
    except psycopg2.Error as e:
        logger.warning(f"Error while closing connection: {e}")
