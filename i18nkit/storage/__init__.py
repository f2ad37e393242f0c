"""Persistence adapters for the selected language."""

from __future__ import annotations

from i18nkit.storage.base import SessionStorage, Storage, StorageType
from i18nkit.storage.database import DatabaseStorage


def create_storage(storage_type: StorageType, database_url: str = "") -> Storage:
    """Return the storage backend for *storage_type*.

    Args:
        storage_type: ``LOCAL`` for durable database storage, ``SESSION``
            for an in-memory store.
        database_url: SQLAlchemy URL, required for ``LOCAL``.
    """
    if storage_type is StorageType.SESSION:
        return SessionStorage()
    return DatabaseStorage(database_url)


__all__ = [
    "DatabaseStorage",
    "SessionStorage",
    "Storage",
    "StorageType",
    "create_storage",
]
