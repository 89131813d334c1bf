"""Browse session: one query state bound to a read-only dataset."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from .config import NewsDeckConfig
from .debounce import Debouncer
from .query.engine import QueryResult, run_query
from .query.facets import FacetIndex, FacetListing, compute_dynamic_counts, facet_options
from .query.models import NormalizedArticle
from .query.pagination import page_window
from .query.state import PAGE_SIZES, FacetGroup, QueryState, SortKey
from .query.url_codec import decode_state, encode_state


@dataclass(frozen=True)
class BrowseView:
    """Everything a display surface needs after one recomputation."""

    result: QueryResult
    counts: Mapping[FacetGroup, Mapping[str, int]]
    facets: Mapping[FacetGroup, FacetListing]
    pages: List[Optional[int]] = field(default_factory=list)
    params: Mapping[str, str] = field(default_factory=dict)
    filtered: bool = False

    def to_dict(self) -> Dict[str, object]:
        result = self.result
        return {
            "query": dict(self.params),
            "total": result.total,
            "page": result.page,
            "pageSize": result.page_size,
            "totalPages": result.total_pages,
            "start": result.display_start,
            "end": result.display_end,
            "empty": result.is_empty,
            "filtered": self.filtered,
            "items": [article.to_dict() for article in result.page_items],
            "facets": {group.value: listing.to_dict() for group, listing in self.facets.items()},
            "pagination": list(self.pages),
        }


class BrowseSession:
    """Owns a QueryState and recomputes the view from scratch on demand.

    Mutations that can change the visible set reset the page to 1, as a
    user changing a filter expects to land on the first page of the new
    result.
    """

    def __init__(
        self,
        articles: Sequence[NormalizedArticle],
        facet_index: FacetIndex,
        state: Optional[QueryState] = None,
        *,
        config: Optional[NewsDeckConfig] = None,
    ) -> None:
        self.articles = articles
        self.facet_index = facet_index
        self.config = config or NewsDeckConfig()
        self.state = state or QueryState(page_size=self.config.default_page_size)
        self._log = logging.getLogger("newsdeck.session")
        # debounced searches land on a timer thread
        self._lock = threading.RLock()

    # Recomputation -------------------------------------------------------

    def refresh(self) -> BrowseView:
        with self._lock:
            return self._compute()

    def _compute(self) -> BrowseView:
        result = run_query(self.articles, self.state)
        counts = compute_dynamic_counts(self.articles, self.state)
        facets = {
            group: facet_options(
                self.facet_index,
                group,
                counts[group],
                self.state,
                top_n=self.config.tags_top_n,
            )
            for group in FacetGroup
        }
        pages = page_window(result.total_pages, result.page, self.config.page_window_radius)
        self._log.debug(
            "refresh: %d of %d articles, page %d/%d",
            result.total,
            len(self.articles),
            result.page,
            result.total_pages,
        )
        return BrowseView(
            result=result,
            counts=counts,
            facets=facets,
            pages=pages,
            params=encode_state(self.state),
            filtered=self.state.has_filters(),
        )

    # Mutations -----------------------------------------------------------

    def set_search(self, text: str) -> None:
        with self._lock:
            self.state.search_text = text or ""
            self.state.page = 1

    def set_sort(self, key: SortKey | str) -> None:
        try:
            sort = SortKey(key)
        except ValueError:
            self._log.debug("ignoring unknown sort key %r", key)
            return
        with self._lock:
            self.state.sort = sort
            self.state.page = 1

    def set_page_size(self, size: int) -> None:
        if size not in PAGE_SIZES:
            self._log.debug("ignoring unsupported page size %r", size)
            return
        with self._lock:
            self.state.page_size = size
            self.state.page = 1

    def toggle(self, group: FacetGroup | str, label: str) -> None:
        with self._lock:
            selected = self.state.selection(FacetGroup(group))
            if label in selected:
                selected.discard(label)
            elif label:
                selected.add(label)
            self.state.page = 1

    def clear_group(self, group: FacetGroup | str) -> None:
        with self._lock:
            self.state.selection(FacetGroup(group)).clear()
            self.state.page = 1

    def go_to_page(self, page: int) -> None:
        # clamped to the real range by the next refresh()
        with self._lock:
            self.state.page = max(1, int(page))

    def toggle_tags_expanded(self) -> None:
        with self._lock:
            self.state.tags_expanded = not self.state.tags_expanded

    def clear_all(self) -> None:
        with self._lock:
            self.state = QueryState(page_size=self.config.default_page_size)

    # URL state -----------------------------------------------------------

    def apply_params(self, params: Mapping[str, object]) -> None:
        with self._lock:
            expanded = self.state.tags_expanded
            state = decode_state(params, default_page_size=self.state.page_size)
            state.tags_expanded = expanded
            self.state = state

    def to_params(self) -> Dict[str, str]:
        with self._lock:
            return encode_state(self.state)

    def debounced_search(self, delay: Optional[float] = None) -> Debouncer:
        """Debounce ``set_search``; it runs on a timer thread under the session lock."""
        if delay is None:
            delay = self.config.search_debounce_ms / 1000.0
        return Debouncer(self.set_search, delay)


__all__ = ["BrowseSession", "BrowseView"]
