"""Error taxonomy for the translation engine.

Only ``UnknownLanguage`` is ever raised to callers of the engine's public
operations.  Parse errors, missing translations and storage failures are
reported to the notification sink and logged instead.
"""

from __future__ import annotations


class I18nError(Exception):
    """Base class for all i18nkit errors."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
class ParseError(I18nError):
    """A language payload could not be turned into a translation tree."""

    def __init__(self, message: str, language: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.language = language

    def __str__(self) -> str:
        if self.language is None:
            return self.message
        return f"Invalid translations for language '{self.language}': {self.message}"


class MalformedPayload(ParseError):
    """The payload is not syntactically valid JSON."""


class InvalidValue(ParseError):
    """A value is neither a string nor an object.

    ``path`` is the dot-joined key path of the offending value; an empty
    path means the top-level value itself.
    """

    def __init__(self, path: str, found: str, language: str | None = None) -> None:
        where = f"at '{path}'" if path else "at top level"
        super().__init__(f"expected string or object {where}, got {found}", language)
        self.path = path
        self.found = found


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class EngineError(I18nError):
    """A runtime operation on the engine was rejected."""


class UnknownLanguage(EngineError):
    """The requested language is not in the catalog."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Language '{code}' is not supported")
        self.code = code


class TranslationMissing(I18nError):
    """Soft error: a key resolved in neither the active nor the default language."""

    def __init__(self, key_path: str, language: str) -> None:
        super().__init__(f"Key '{key_path}' not found for language '{language}'")
        self.key_path = key_path
        self.language = language


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------
class StorageError(I18nError):
    """The persistence backend failed to read or write a value."""
