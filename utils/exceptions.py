"""
utils/exceptions.py
-------------------
Error taxonomy shared by the data layer and the CLI.

A missing row is not an error: lookups return ``None`` instead.
"""


class CatalogError(Exception):
    """Base class for every error the catalog reports to its caller."""


class ConfigurationError(CatalogError):
    """The database URL is absent or unusable. Fatal at startup."""


class StorageError(CatalogError):
    """Connecting to the database or executing a statement failed."""


class ValidationError(CatalogError):
    """A request was rejected before touching the database."""
