"""FastAPI demo host: exposes one engine over HTTP.

The engine is built during ``lifespan`` from :class:`Settings` unless one
is passed to :func:`create_app`.  With no ``I18N_LOCALES_DIR`` configured
the bundled demo locales (``en``, ``fr``, ``es``, ``ar``) are served.

Run locally::

    uvicorn i18nkit.web.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from i18nkit.core.config import get_settings
from i18nkit.core.logging import setup_logging
from i18nkit.engine import I18nEngine
from i18nkit.errors import UnknownLanguage
from i18nkit.factory import build_engine
from i18nkit.storage import DatabaseStorage
from i18nkit.store import load_locales_dir

logger = logging.getLogger(__name__)

BUNDLED_LOCALES_DIR = Path(__file__).resolve().parents[1] / "locales"


class LanguageChange(BaseModel):
    """Body of ``PUT /language``."""

    code: str


def _engine(request: Request) -> I18nEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Engine not initialised")
    return engine


def _language_payload(engine: I18nEngine) -> dict[str, str]:
    return {"language": engine.current_language(), "dir": engine.text_direction()}


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------


def create_app(engine: I18nEngine | None = None) -> FastAPI:
    """Build the FastAPI app, optionally around an existing *engine*."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        built = False
        if getattr(app.state, "engine", None) is None:
            settings = get_settings()
            setup_logging(settings.LOG_LEVEL)
            translations = None
            if not settings.I18N_LOCALES_DIR:
                translations = load_locales_dir(BUNDLED_LOCALES_DIR)
            app.state.engine = build_engine(settings, translations)
            built = True
            logger.info(
                "Demo host started",
                extra={"event": "startup", "language": app.state.engine.current_language()},
            )
        yield

        # --- Shutdown ---
        storage = app.state.engine.storage if built else None
        if isinstance(storage, DatabaseStorage):
            storage.dispose()
            logger.info("Storage connections closed", extra={"event": "shutdown"})

    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None)
    app.state.engine = engine

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/languages")
    async def languages(request: Request) -> dict[str, Any]:
        engine = _engine(request)
        return {"languages": engine.languages(), "default": engine.default_language}

    @app.get("/language")
    async def current_language(request: Request) -> dict[str, str]:
        return _language_payload(_engine(request))

    @app.put("/language")
    async def change_language(body: LanguageChange, request: Request) -> dict[str, str]:
        """Switch the active language; 404 if it is not in the catalog."""
        engine = _engine(request)
        try:
            engine.set_language(body.code)
        except UnknownLanguage as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _language_payload(engine)

    @app.get("/t/{key_path}")
    async def translate(key_path: str, request: Request) -> dict[str, str]:
        engine = _engine(request)
        return {
            "key": key_path,
            "value": engine.translate(key_path),
            "language": engine.current_language(),
        }

    return app


app = create_app()
