"""Notification sinks: where the engine reports language changes and errors.

A host plugs in its own object implementing :class:`NotificationSink`, or
wraps two plain callables with :class:`CallbackSink`::

    sink = CallbackSink(
        onchange=lambda code: print("now", code),
        onerror=lambda msg: print("i18n error:", msg),
    )
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    """Receives language-change events and error messages."""

    def on_language_changed(self, code: str) -> None: ...

    def on_error(self, message: str) -> None: ...


class LoggingSink:
    """Default sink: writes every notification to the log."""

    def on_language_changed(self, code: str) -> None:
        logger.info(
            "Language changed to %s",
            code,
            extra={"event": "language_changed", "language": code},
        )

    def on_error(self, message: str) -> None:
        logger.warning("%s", message, extra={"event": "i18n_error"})


class CallbackSink:
    """Adapt ``onchange`` / ``onerror`` callables to the sink interface.

    Either callback may be omitted; the matching notification is then
    dropped.
    """

    def __init__(
        self,
        onchange: Callable[[str], None] | None = None,
        onerror: Callable[[str], None] | None = None,
    ) -> None:
        self._onchange = onchange
        self._onerror = onerror

    def on_language_changed(self, code: str) -> None:
        if self._onchange is not None:
            self._onchange(code)

    def on_error(self, message: str) -> None:
        if self._onerror is not None:
            self._onerror(message)
