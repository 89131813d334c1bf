"""Filter, sort and paginate in one pass over the dataset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .filters import filter_articles
from .models import NormalizedArticle
from .pagination import paginate
from .sorting import sort_articles
from .state import QueryState


@dataclass(frozen=True)
class QueryResult:
    items: Sequence[NormalizedArticle] = field(default_factory=tuple)
    page_items: Sequence[NormalizedArticle] = field(default_factory=tuple)
    total: int = 0
    page: int = 1
    page_size: int = 20
    total_pages: int = 1
    start_index: int = 0
    end_index: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def display_start(self) -> int:
        return 0 if self.is_empty else self.start_index + 1

    @property
    def display_end(self) -> int:
        return 0 if self.is_empty else self.end_index


def run_query(articles: Sequence[NormalizedArticle], state: QueryState) -> QueryResult:
    """Compute the visible result for *state*.

    The clamped page number is written back into ``state.page`` so later
    serialization reflects the page actually shown.
    """

    ordered = sort_articles(filter_articles(articles, state), state.sort)
    page = paginate(ordered, state.page, state.page_size)
    if state.page != page.page:
        state.page = page.page
    return QueryResult(
        items=tuple(ordered),
        page_items=page.items,
        total=page.total,
        page=page.page,
        page_size=page.page_size,
        total_pages=page.total_pages,
        start_index=page.start_index,
        end_index=page.end_index,
    )
