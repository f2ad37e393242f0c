"""Shared test fixtures.

Engines are built from small inline JSON payloads; collaborators
(storage, notification sink) are ``MagicMock`` objects so tests can
assert on the exact calls made.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from i18nkit.engine import I18nEngine
from i18nkit.notify import LoggingSink
from i18nkit.storage.base import SessionStorage

EN = {
    "greeting": "Hello",
    "farewell": "Goodbye",
    "menu": {"file": {"open": "Open", "save": "Save"}},
}
FR = {
    "greeting": "Bonjour",
    "menu": {"file": {"open": "Ouvrir"}},
}


@pytest.fixture
def raw_translations() -> dict[str, str]:
    """``en`` and ``fr`` payloads; ``fr`` lacks ``farewell`` and ``menu.file.save``."""
    return {"en": json.dumps(EN), "fr": json.dumps(FR)}


@pytest.fixture
def sink() -> MagicMock:
    return MagicMock(spec=LoggingSink)


@pytest.fixture
def storage() -> MagicMock:
    mock = MagicMock(spec=SessionStorage)
    mock.get.return_value = None
    return mock


@pytest.fixture
def engine(raw_translations: dict[str, str], storage: MagicMock, sink: MagicMock) -> I18nEngine:
    """Engine with ``en`` default, mocked storage and sink."""
    return I18nEngine(raw_translations, default_language="en", storage=storage, sink=sink)
