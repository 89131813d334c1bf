"""Ordering of filtered article sequences."""

from __future__ import annotations

from typing import Iterable, List

from .models import NormalizedArticle, sortable_ts
from .state import SortKey


def sort_articles(articles: Iterable[NormalizedArticle], key: SortKey) -> List[NormalizedArticle]:
    """Return a new list ordered by *key*; the input is left untouched.

    Python's sort is stable, so equal primary keys keep their relative
    input order. Unparsable timestamps sort as epoch 0.
    """

    key = SortKey(key)
    items = list(articles)
    if key is SortKey.OLDEST:
        return sorted(items, key=lambda a: sortable_ts(a.published_ts))
    if key is SortKey.PUBLISHER_AZ:
        return sorted(items, key=lambda a: (a.publisher_name.lower(), a.title.lower()))
    if key is SortKey.TITLE_AZ:
        return sorted(items, key=lambda a: (a.title.lower(), -sortable_ts(a.published_ts)))
    return sorted(items, key=lambda a: sortable_ts(a.published_ts), reverse=True)
