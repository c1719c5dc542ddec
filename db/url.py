"""
db/url.py
---------
Normalizes a generic database URL into the form psycopg2 (libpq) connects with.

Credentials embedded in the URL are moved into explicit query parameters:

    postgres://u:p@host:5432/db?sslmode=require
        -> postgresql://host:5432/db?user=u&password=p&sslmode=require
"""

from urllib.parse import urlsplit

from utils.logger import get_logger

logger = get_logger(__name__)

DRIVER_PREFIX = "postgresql://"
ALIAS_PREFIX = "postgres://"


def _is_native(url: str) -> bool:
    """A libpq URI with no user-info in its authority is already driver-ready."""
    if not url.startswith(DRIVER_PREFIX):
        return False
    authority = url[len(DRIVER_PREFIX):].split("/", 1)[0].split("?", 1)[0]
    return "@" not in authority


def normalize_database_url(url: str) -> str:
    """
    Convert a ``postgres://`` or ``postgresql://`` URL into a libpq URI with
    ``user`` and ``password`` passed as query parameters.

    Args:
        url: The raw URL, usually taken from the environment.

    Returns:
        The normalized URI, or ``url`` unchanged when it is already native,
        is not a PostgreSQL URL, or cannot be parsed.
    """
    if _is_native(url):
        return url

    candidate = url
    if candidate.startswith(ALIAS_PREFIX):
        candidate = DRIVER_PREFIX + candidate[len(ALIAS_PREFIX):]

    if not candidate.startswith(DRIVER_PREFIX):
        return url

    try:
        parts = urlsplit(candidate)
        userinfo, _, hostport = parts.netloc.rpartition("@")
        port = parts.port
        host = hostport.rsplit(":", 1)[0] if port is not None else hostport
        # "host:" carries an empty port; drop the dangling separator.
        if port is None and host.endswith(":"):
            host = host[:-1]
        if not host:
            raise ValueError("missing host")

        user = password = None
        if ":" in userinfo:
            user, password = userinfo.split(":", 1)

        normalized = DRIVER_PREFIX + host
        if port is not None:
            normalized += f":{port}"
        normalized += parts.path

        params = []
        if user is not None:
            params.append(f"user={user}")
        if password is not None:
            params.append(f"password={password}")
        if parts.query:
            params.append(parts.query)
        if params:
            normalized += "?" + "&".join(params)
        return normalized
    except ValueError as e:
        logger.warning(f"Could not normalize DATABASE_URL, using it as given: {e}")
        return url
