"""Dataset source: a local JSON file or a JSON document served over HTTP."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx

_log = logging.getLogger("newsdeck.loader")


class DatasetLoadError(RuntimeError):
    """Raised when the article dataset cannot be fetched or parsed."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"failed to load {source}: {message}")
        self.source = source


def _default_client_factory(timeout: float = 20.0) -> httpx.AsyncClient:
    headers = {"User-Agent": "NewsDeck/0.1", "Cache-Control": "no-store"}
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout), headers=headers)


def is_remote(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def extract_articles(payload: Any) -> List[Any]:
    """Pull the article records out of a decoded JSON document."""

    if isinstance(payload, dict):
        payload = payload.get("articles")
    if isinstance(payload, list):
        return list(payload)
    return []


async def _fetch_remote(
    source: str, client_factory: Callable[[], httpx.AsyncClient]
) -> Any:
    try:
        async with client_factory() as client:
            response = await client.get(source, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as exc:
        raise DatasetLoadError(source, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise DatasetLoadError(source, str(exc) or exc.__class__.__name__) from exc
    except ValueError as exc:
        raise DatasetLoadError(source, f"invalid JSON: {exc}") from exc


def _read_local(source: str | os.PathLike[str]) -> Any:
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise DatasetLoadError(str(source), exc.strerror or str(exc)) from exc
    except ValueError as exc:
        raise DatasetLoadError(str(source), f"invalid JSON: {exc}") from exc


async def load_articles(
    source: str | os.PathLike[str],
    *,
    client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    timeout: float = 20.0,
) -> List[Any]:
    """Load the raw article records from *source* in one piece."""

    location = os.fspath(source)
    if is_remote(location):
        factory = client_factory or (lambda: _default_client_factory(timeout))
        payload = await _fetch_remote(location, factory)
    else:
        payload = _read_local(location)
    articles = extract_articles(payload)
    _log.info("loaded %d articles from %s", len(articles), location)
    return articles


__all__ = ["DatasetLoadError", "extract_articles", "is_remote", "load_articles"]
