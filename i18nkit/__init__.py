"""i18nkit: nested JSON translations with fallback and a persisted language.

Build an engine from raw per-language JSON payloads, look keys up with
``translate("menu.file.open")`` and switch with ``set_language("fr")``.

Fallback behaviour:
- Key missing in the active language -> default language.
- Key missing in both -> the key itself (safe for debugging).
"""

from __future__ import annotations

from i18nkit.engine import I18nEngine
from i18nkit.errors import (
    EngineError,
    I18nError,
    InvalidValue,
    MalformedPayload,
    ParseError,
    StorageError,
    TranslationMissing,
    UnknownLanguage,
)
from i18nkit.notify import CallbackSink, LoggingSink, NotificationSink
from i18nkit.resolver import resolve
from i18nkit.storage import DatabaseStorage, SessionStorage, Storage, StorageType
from i18nkit.store import TranslationTree, parse

__all__ = [
    "CallbackSink",
    "DatabaseStorage",
    "EngineError",
    "I18nEngine",
    "I18nError",
    "InvalidValue",
    "LoggingSink",
    "MalformedPayload",
    "NotificationSink",
    "ParseError",
    "SessionStorage",
    "Storage",
    "StorageError",
    "StorageType",
    "TranslationMissing",
    "TranslationTree",
    "UnknownLanguage",
    "parse",
    "resolve",
]
