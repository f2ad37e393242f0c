"""Translation engine: catalog, active language, fallback, switching.

Usage::

    from i18nkit import I18nEngine

    engine = I18nEngine(
        {"en": '{"greeting": "Hello"}', "fr": '{"greeting": "Bonjour"}'},
        default_language="en",
    )
    engine.translate("greeting")   # -> "Hello"
    engine.set_language("fr")
    engine.translate("greeting")   # -> "Bonjour"
    engine.translate("missing")    # -> "missing"

Lookup order for ``translate``:
- active language,
- default language,
- the key path itself (reported to the sink as a missing translation).
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping

from i18nkit.direction import text_direction
from i18nkit.errors import StorageError, TranslationMissing, UnknownLanguage
from i18nkit.notify import LoggingSink, NotificationSink
from i18nkit.resolver import iter_leaves, resolve
from i18nkit.storage.base import Storage
from i18nkit.store import TranslationTree, parse_catalog

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_STORAGE_NAME = "i18nrs"


class I18nEngine:
    """Resolve translation keys across a fixed catalog of languages.

    Args:
        translations: Language code -> raw JSON payload.  Languages whose
            payload fails to parse are left out of the catalog and
            reported to *sink*.
        default_language: Initially active language and fallback for
            missing keys.  It may be absent from the catalog.
        storage: Where ``set_language`` persists the selection.  ``None``
            disables persistence.
        storage_name: Key under which the language code is stored.
        sink: Receives language-change and error notifications.  Defaults
            to :class:`~i18nkit.notify.LoggingSink`.
    """

    def __init__(
        self,
        translations: Mapping[str, str | bytes],
        default_language: str = DEFAULT_LANGUAGE,
        *,
        storage: Storage | None = None,
        storage_name: str = DEFAULT_STORAGE_NAME,
        sink: NotificationSink | None = None,
    ) -> None:
        self._sink: NotificationSink = sink if sink is not None else LoggingSink()
        self._storage = storage
        self._storage_name = storage_name
        self._default_language = default_language
        self._lock = threading.Lock()

        catalog, errors = parse_catalog(translations)
        self._catalog: Mapping[str, TranslationTree] = MappingProxyType(catalog)

        for code, error in errors.items():
            logger.error(
                "Skipping language %s: %s",
                code,
                error.message,
                extra={"event": "translations_rejected", "language": code},
            )
            self._sink.on_error(str(error))

        if default_language not in self._catalog:
            message = f"Default language '{default_language}' has no translations"
            logger.warning(message, extra={"event": "default_missing", "language": default_language})
            self._sink.on_error(message)

        self._active_language = default_language

        logger.info(
            "I18n engine ready with %d language(s)",
            len(self._catalog),
            extra={"event": "engine_ready", "language": default_language},
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def storage(self) -> Storage | None:
        return self._storage

    @property
    def catalog(self) -> Mapping[str, TranslationTree]:
        """Read-only mapping of every successfully parsed language."""
        return self._catalog

    def current_language(self) -> str:
        """Return the active language code."""
        return self._active_language

    def languages(self) -> list[str]:
        """Return sorted list of registered language codes."""
        return sorted(self._catalog)

    def has_language(self, code: str) -> bool:
        return code in self._catalog

    def keys(self, code: str | None = None) -> list[str]:
        """Return every leaf key path defined for *code* (active by default).

        Raises:
            UnknownLanguage: *code* is not in the catalog.
        """
        code = self._active_language if code is None else code
        tree = self._catalog.get(code)
        if tree is None:
            raise UnknownLanguage(code)
        return [path for path, _ in iter_leaves(tree)]

    def text_direction(self) -> str:
        """``"rtl"`` or ``"ltr"`` for the active language."""
        return text_direction(self._active_language)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def translate(self, key_path: str) -> str:
        """Return the string for *key_path*; never raises for a missing key.

        Falls back to the default language, then to *key_path* itself.
        """
        active = self._active_language

        tree = self._catalog.get(active)
        if tree is not None:
            value = resolve(tree, key_path)
            if value is not None:
                return value

        fallback = self._catalog.get(self._default_language)
        if fallback is not None:
            value = resolve(fallback, key_path)
            if value is not None:
                return value

        missing = TranslationMissing(key_path, active)
        logger.debug(
            str(missing),
            extra={"event": "translation_missing", "language": active, "key_path": key_path},
        )
        self._sink.on_error(str(missing))
        return key_path

    t = translate

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------
    def set_language(self, code: str) -> None:
        """Make *code* the active language, persist it, and notify.

        Re-selecting the active language repeats the write and the
        notification.  A storage failure is reported to the sink but does
        not undo the switch.

        Raises:
            UnknownLanguage: *code* is not in the catalog.  Nothing is
                changed or persisted.
        """
        if code not in self._catalog:
            error = UnknownLanguage(code)
            logger.warning(str(error), extra={"event": "language_rejected", "language": code})
            self._sink.on_error(str(error))
            raise error

        # Writes stay in the same order as the in-memory switches.
        with self._lock:
            self._active_language = code
            self._persist(code)

        self._sink.on_language_changed(code)

    def restore(self, persisted_code: str | None) -> None:
        """Activate a previously stored language if it is still available.

        ``None`` or a code missing from the catalog leaves the default
        language active; the latter is reported to the sink.
        """
        if persisted_code is None:
            return
        if persisted_code not in self._catalog:
            message = f"Stored language '{persisted_code}' is not supported"
            logger.warning(message, extra={"event": "restore_rejected", "language": persisted_code})
            self._sink.on_error(message)
            return

        with self._lock:
            self._active_language = persisted_code
        logger.info(
            "Restored language %s",
            persisted_code,
            extra={"event": "language_restored", "language": persisted_code},
        )

    def restore_from_storage(self) -> None:
        """Read the stored language (if any) and :meth:`restore` it."""
        if self._storage is None:
            return
        try:
            persisted = self._storage.get(self._storage_name)
        except StorageError as exc:
            logger.error(
                "Failed to read stored language: %s",
                exc,
                extra={"event": "storage_read_failed"},
            )
            self._sink.on_error(str(exc))
            return
        self.restore(persisted)

    def _persist(self, code: str) -> None:
        if self._storage is None:
            return
        try:
            self._storage.set(self._storage_name, code)
        except StorageError as exc:
            logger.error(
                "Failed to persist language %s: %s",
                code,
                exc,
                extra={"event": "storage_write_failed", "language": code},
            )
            self._sink.on_error(str(exc))
