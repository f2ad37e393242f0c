"""Text direction helpers for right-to-left scripts."""

from __future__ import annotations

# Languages whose script is written right-to-left.
RTL_LANGUAGES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "ps", "ku", "sd"})


def is_rtl_language(code: str) -> bool:
    """True when *code* is one of :data:`RTL_LANGUAGES` (exact match)."""
    return code in RTL_LANGUAGES


def text_direction(code: str) -> str:
    """Return the HTML ``dir`` value for *code*: ``"rtl"`` or ``"ltr"``."""
    return "rtl" if is_rtl_language(code) else "ltr"
