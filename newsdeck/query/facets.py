"""Facet counting: global option index and group-exclusion dynamic counts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .filters import filter_articles
from .models import NormalizedArticle
from .state import FacetGroup, QueryState

DEFAULT_TAGS_TOP_N = 18


def _labels(article: NormalizedArticle, group: FacetGroup) -> Sequence[str]:
    if group is FacetGroup.CATEGORY:
        return (article.category,)
    if group is FacetGroup.PUBLISHER:
        return (article.publisher_name,)
    if group is FacetGroup.LANGUAGE:
        return (article.language,)
    # every occurrence counts, duplicates included
    return article.tags


def tally(articles: Iterable[NormalizedArticle], group: FacetGroup) -> Dict[str, int]:
    """Count option labels of *group* across *articles*, skipping empty labels."""

    counts: Counter[str] = Counter()
    for article in articles:
        for label in _labels(article, group):
            if label:
                counts[label] += 1
    return dict(counts)


@dataclass(frozen=True)
class FacetIndex:
    """Global option counts per group over the whole dataset."""

    categories: Mapping[str, int] = field(default_factory=dict)
    publishers: Mapping[str, int] = field(default_factory=dict)
    languages: Mapping[str, int] = field(default_factory=dict)
    tags: Mapping[str, int] = field(default_factory=dict)

    def for_group(self, group: FacetGroup) -> Mapping[str, int]:
        return {
            FacetGroup.CATEGORY: self.categories,
            FacetGroup.PUBLISHER: self.publishers,
            FacetGroup.LANGUAGE: self.languages,
            FacetGroup.TAG: self.tags,
        }[group]

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {group.value: dict(self.for_group(group)) for group in FacetGroup}


def compute_facets(articles: Sequence[NormalizedArticle]) -> FacetIndex:
    return FacetIndex(
        categories=tally(articles, FacetGroup.CATEGORY),
        publishers=tally(articles, FacetGroup.PUBLISHER),
        languages=tally(articles, FacetGroup.LANGUAGE),
        tags=tally(articles, FacetGroup.TAG),
    )


def compute_dynamic_counts(
    articles: Sequence[NormalizedArticle], state: QueryState
) -> Dict[FacetGroup, Dict[str, int]]:
    """Option counts per group with every filter applied except the group's own.

    A count therefore answers "how many results if this option were also
    selected". Recomputed from scratch on every call.
    """

    return {
        group: tally(filter_articles(articles, state, exclude=group), group)
        for group in FacetGroup
    }


@dataclass(frozen=True)
class FacetOption:
    label: str
    total: int
    count: int
    selected: bool

    @property
    def disabled(self) -> bool:
        return self.count == 0 and not self.selected

    def to_dict(self) -> Dict[str, object]:
        return {
            "label": self.label,
            "total": self.total,
            "count": self.count,
            "selected": self.selected,
            "disabled": self.disabled,
        }


@dataclass(frozen=True)
class FacetListing:
    group: FacetGroup
    options: List[FacetOption]
    has_more: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            "options": [option.to_dict() for option in self.options],
            "hasMore": self.has_more,
        }


def facet_options(
    index: FacetIndex,
    group: FacetGroup,
    counts: Mapping[str, int],
    state: QueryState,
    *,
    top_n: Optional[int] = DEFAULT_TAGS_TOP_N,
) -> FacetListing:
    """Build the ordered option list shown for *group*.

    Tags are ranked by global frequency and cut to *top_n* unless the state
    has them expanded; the other groups list every option by label.
    """

    selected = state.selection(group)
    entries = [(label, total) for label, total in index.for_group(group).items() if label]
    has_more = False
    if group is FacetGroup.TAG:
        entries.sort(key=lambda item: (-item[1], item[0].lower(), item[0]))
        if top_n is not None and len(entries) > top_n:
            has_more = True
            if not state.tags_expanded:
                entries = entries[:top_n]
    else:
        entries.sort(key=lambda item: (item[0].lower(), item[0]))
    options = [
        FacetOption(
            label=label,
            total=total,
            count=counts.get(label, 0),
            selected=label in selected,
        )
        for label, total in entries
    ]
    return FacetListing(group=group, options=options, has_more=has_more)
