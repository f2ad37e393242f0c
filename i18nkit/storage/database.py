"""Durable language storage on top of SQLAlchemy.

One row per storage key in the ``preferences`` table.  Any SQLAlchemy URL
works; the default configuration uses a local SQLite file.  Driver and
SQL errors are wrapped in :class:`~i18nkit.errors.StorageError` so the
engine can treat persistence failures as non-fatal.
"""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import DateTime, String, create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from i18nkit.errors import StorageError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Preference(Base):
    """A persisted key/value pair (e.g. ``i18nrs`` -> ``"fr"``)."""

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(String(64), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Preference {self.key}={self.value}>"


class DatabaseStorage:
    """Storage backed by the ``preferences`` table.

    Args:
        url: SQLAlchemy database URL, e.g. ``"sqlite:///i18n.db"``.
        engine: An existing engine to reuse instead of *url*.

    The table is created on first use if it does not exist.
    """

    def __init__(self, url: str | None = None, *, engine: Engine | None = None) -> None:
        if engine is None:
            if not url:
                raise ValueError("DatabaseStorage requires a database URL or an engine")
            engine = create_engine(url, echo=False, pool_pre_ping=True)
        self._engine = engine
        self._session_factory: sessionmaker[Session] = sessionmaker(
            engine, expire_on_commit=False
        )
        self._ready = False

    def _ensure_schema(self) -> None:
        if not self._ready:
            Base.metadata.create_all(self._engine)
            self._ready = True

    def get(self, key: str) -> str | None:
        try:
            self._ensure_schema()
            with self._session_factory() as session:
                stmt = select(Preference.value).where(Preference.key == key)
                return session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read '{key}' from database: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._ensure_schema()
            with self._session_factory.begin() as session:
                row = session.get(Preference, key)
                if row is None:
                    session.add(Preference(key=key, value=value))
                else:
                    row.value = value
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write '{key}' to database: {exc}") from exc
        logger.debug("Stored %s=%s", key, value, extra={"event": "preference_saved"})

    def remove(self, key: str) -> None:
        try:
            self._ensure_schema()
            with self._session_factory.begin() as session:
                row = session.get(Preference, key)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to remove '{key}' from database: {exc}") from exc

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
