"""Search and facet predicates applied to the normalized dataset."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .models import NormalizedArticle
from .state import FacetGroup, QueryState


def matches(
    article: NormalizedArticle,
    state: QueryState,
    *,
    needle: str,
    exclude: Optional[FacetGroup] = None,
) -> bool:
    if needle and needle not in article.search_blob:
        return False
    if exclude is not FacetGroup.CATEGORY and state.categories:
        if article.category not in state.categories:
            return False
    if exclude is not FacetGroup.PUBLISHER and state.publishers:
        if article.publisher_name not in state.publishers:
            return False
    if exclude is not FacetGroup.LANGUAGE and state.languages:
        if article.language not in state.languages:
            return False
    if exclude is not FacetGroup.TAG and state.tags:
        # any selected tag is enough
        if not any(tag in state.tags for tag in article.tags):
            return False
    return True


def filter_articles(
    articles: Iterable[NormalizedArticle],
    state: QueryState,
    *,
    exclude: Optional[FacetGroup] = None,
) -> List[NormalizedArticle]:
    """Return the articles matching *state*, preserving input order.

    With *exclude* set, that group's own selection is ignored; this is the
    base set for the group's dynamic option counts.
    """

    needle = state.normalized_search()
    return [
        article
        for article in articles
        if matches(article, state, needle=needle, exclude=exclude)
    ]
