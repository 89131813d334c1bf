"""Core backend wiring: configuration plus the loaded, read-only dataset."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

import httpx

from .config import NewsDeckConfig
from .loader import DatasetLoadError, load_articles
from .query.facets import FacetIndex, compute_facets
from .query.models import NormalizedArticle
from .query.normalize import normalize_articles
from .session import BrowseSession


class NewsDeckBackend:
    """Holds the dataset for the lifetime of the process.

    A reload replaces the dataset wholesale; a failed reload keeps the
    previous one.
    """

    def __init__(
        self,
        config: Optional[NewsDeckConfig] = None,
        *,
        http_client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self.config = config or NewsDeckConfig()
        self._client_factory = http_client_factory
        self._articles: Sequence[NormalizedArticle] = ()
        self._facets = FacetIndex()
        self._loaded = False
        self.last_error: Optional[str] = None
        self._log = logging.getLogger("newsdeck.backend")

    @property
    def ready(self) -> bool:
        return self._loaded

    @property
    def articles(self) -> Sequence[NormalizedArticle]:
        return self._articles

    @property
    def facets(self) -> FacetIndex:
        return self._facets

    def set_dataset(self, records: Sequence[Any]) -> int:
        """Normalize *records* and make them the current dataset."""

        articles = tuple(normalize_articles(records))
        self._articles = articles
        self._facets = compute_facets(articles)
        self._loaded = True
        self.last_error = None
        return len(articles)

    async def reload(self) -> int:
        source = self.config.data_source
        try:
            records = await load_articles(
                source,
                client_factory=self._client_factory,
                timeout=self.config.fetch_timeout,
            )
        except DatasetLoadError as exc:
            self.last_error = str(exc)
            self._log.warning("dataset load failed: %s", exc)
            raise
        count = self.set_dataset(records)
        self._log.info("dataset ready: %d articles from %s", count, source)
        return count

    def session(self, params: Optional[Mapping[str, object]] = None) -> BrowseSession:
        session = BrowseSession(self._articles, self._facets, config=self.config)
        if params:
            session.apply_params(params)
        return session

    def health(self) -> dict[str, object]:
        if self.last_error is not None:
            status = "loading_failed"
        elif not self._loaded or not self._articles:
            status = "empty"
        else:
            status = "ok"
        return {
            "status": status,
            "articles": len(self._articles),
            "last_error": self.last_error,
            "config": self.config.model_dump(),
        }
