"""Persistence adapter interface and the in-memory session store."""

from __future__ import annotations

import enum
from typing import Protocol


class StorageType(str, enum.Enum):
    """Where the selected language is persisted."""

    # Durable until explicitly cleared (database-backed).
    LOCAL = "local"
    # Lives only as long as the current process / session.
    SESSION = "session"


class Storage(Protocol):
    """Key-value string store used to persist the active language.

    ``set`` and ``remove`` raise :class:`~i18nkit.errors.StorageError` on
    failure; ``get`` returns ``None`` for an absent key.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class SessionStorage:
    """Session-scoped storage kept in a plain dict."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
