"""Translation store: raw JSON payloads -> read-only translation trees.

A tree is a nested mapping whose values are either ``str`` leaves or
further trees.  Anything else in the payload (numbers, booleans, arrays,
``null``) rejects the whole language; a partially populated tree is never
produced.

Usage::

    from i18nkit.store import parse

    tree = parse('{"menu": {"file": {"open": "Open"}}}')
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Union

from i18nkit.errors import InvalidValue, MalformedPayload, ParseError

logger = logging.getLogger(__name__)

TranslationTree = Mapping[str, Union[str, "TranslationTree"]]

_JSON_TYPE_NAMES: dict[type, str] = {
    bool: "boolean",
    int: "number",
    float: "number",
    list: "array",
    type(None): "null",
}


def _build(node: dict[str, Any], prefix: str) -> TranslationTree:
    """Validate *node* recursively and freeze it."""
    frozen: dict[str, Any] = {}
    for key, value in node.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, str):
            frozen[key] = value
        elif isinstance(value, dict):
            frozen[key] = _build(value, path)
        else:
            raise InvalidValue(path, _JSON_TYPE_NAMES.get(type(value), type(value).__name__))
    return MappingProxyType(frozen)


def parse(raw: str | bytes) -> TranslationTree:
    """Parse one language's JSON payload into a translation tree.

    Args:
        raw: JSON text whose top-level value must be an object.

    Returns:
        A read-only nested mapping of string leaves.

    Raises:
        MalformedPayload: The text is not valid JSON.
        InvalidValue: The top level is not an object, or some value is
            neither a string nor an object.
    """
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise InvalidValue("", _JSON_TYPE_NAMES.get(type(data), type(data).__name__))
        return _build(data, "")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayload(str(exc)) from exc
    except RecursionError as exc:
        raise MalformedPayload("payload is nested too deeply") from exc


def parse_catalog(
    translations: Mapping[str, str | bytes],
) -> tuple[dict[str, TranslationTree], dict[str, ParseError]]:
    """Parse every language in *translations*.

    Returns:
        ``(catalog, errors)``: the successfully parsed trees keyed by
        language code, and the parse error of each rejected language.
    """
    catalog: dict[str, TranslationTree] = {}
    errors: dict[str, ParseError] = {}
    for code, raw in translations.items():
        try:
            catalog[code] = parse(raw)
        except ParseError as exc:
            exc.language = code
            errors[code] = exc
    return catalog, errors


def load_locales_dir(path: str | Path) -> dict[str, bytes]:
    """Read ``<code>.json`` files from *path* into a raw translations map.

    The file stem is used verbatim as the language code.  Contents are kept as
    raw bytes, neither decoded nor parsed, so that one broken file only
    removes its own language.

    Raises:
        FileNotFoundError: *path* does not exist or is not a directory.
    """
    directory = Path(path)
    if not directory.is_dir():
        raise FileNotFoundError(f"Locales directory not found: {directory}")

    raw: dict[str, bytes] = {}
    for file in sorted(directory.glob("*.json")):
        raw[file.stem] = file.read_bytes()
    logger.debug(
        "Loaded %d locale files from %s",
        len(raw),
        directory,
        extra={"event": "locales_loaded"},
    )
    return raw
