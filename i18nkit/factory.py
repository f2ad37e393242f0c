"""Engine factory.

Wires an :class:`~i18nkit.engine.I18nEngine` from :class:`Settings`:
- translations (explicit map, or ``I18N_LOCALES_DIR``)
- persistence backend (``I18N_STORAGE_TYPE`` / ``I18N_DATABASE_URL``)
- stored language restored on startup
"""

from __future__ import annotations

from typing import Mapping

from i18nkit.core.config import Settings
from i18nkit.engine import I18nEngine
from i18nkit.notify import NotificationSink
from i18nkit.storage import Storage, create_storage
from i18nkit.store import load_locales_dir


def build_engine(
    settings: Settings,
    translations: Mapping[str, str | bytes] | None = None,
    *,
    sink: NotificationSink | None = None,
    storage: Storage | None = None,
) -> I18nEngine:
    """Create a configured engine with the stored language restored.

    Args:
        settings: Application settings.
        translations: Raw payloads per language.  When omitted they are
            read from ``settings.I18N_LOCALES_DIR``.
        sink: Notification sink; the engine's logging sink by default.
        storage: Overrides the backend selected by the settings.

    Raises:
        ValueError: No translations were given and no locales directory
            is configured.
    """
    if translations is None:
        if not settings.I18N_LOCALES_DIR:
            raise ValueError("No translations given and I18N_LOCALES_DIR is not set")
        translations = load_locales_dir(settings.I18N_LOCALES_DIR)

    if storage is None:
        storage = create_storage(settings.I18N_STORAGE_TYPE, settings.I18N_DATABASE_URL)

    engine = I18nEngine(
        translations,
        default_language=settings.I18N_DEFAULT_LANGUAGE,
        storage=storage,
        storage_name=settings.I18N_STORAGE_NAME,
        sink=sink,
    )
    engine.restore_from_storage()
    return engine
