"""FastAPI application serving the article browser."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request

from .backend import NewsDeckBackend
from .config import NewsDeckConfig
from .loader import DatasetLoadError
from .query.url_codec import parse_query_string

_log = logging.getLogger("newsdeck.api")

_TRUTHY = {"1", "true", "yes", "on"}


def create_app(
    *,
    backend: Optional[NewsDeckBackend] = None,
    config: Optional[NewsDeckConfig] = None,
) -> FastAPI:
    """Create a configured FastAPI application."""

    if backend is None:
        backend = NewsDeckBackend(config)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if not backend.ready:
            try:
                await backend.reload()
            except DatasetLoadError:
                # reported by /health; /reload retries
                _log.exception("initial dataset load failed")
        yield

    app = FastAPI(title="NewsDeck", version="0.1.0", lifespan=lifespan)

    def require_dataset() -> None:
        if not backend.ready:
            raise HTTPException(status_code=503, detail=backend.last_error or "dataset not loaded")

    @app.get("/health")
    async def get_health() -> dict:
        return backend.health()

    @app.get("/articles")
    async def list_articles(request: Request) -> dict[str, Any]:
        require_dataset()
        # raw query string so malformed values fall back instead of failing validation
        params = parse_query_string(request.url.query)
        session = backend.session(params)
        if params.get("tagsExpanded", "").strip().lower() in _TRUTHY:
            session.toggle_tags_expanded()
        return session.refresh().to_dict()

    @app.get("/facets")
    async def get_facets() -> dict[str, dict[str, int]]:
        require_dataset()
        return backend.facets.to_dict()

    @app.post("/reload")
    async def reload_dataset() -> dict[str, object]:
        try:
            count = await backend.reload()
        except DatasetLoadError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return {"status": "ok", "articles": count}

    return app
