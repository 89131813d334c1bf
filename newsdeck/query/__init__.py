"""Query engine: filtering, facet counting, sorting, paging and URL state."""

from .engine import QueryResult, run_query
from .facets import (
    FacetIndex,
    FacetListing,
    FacetOption,
    compute_dynamic_counts,
    compute_facets,
    facet_options,
)
from .filters import filter_articles
from .models import NormalizedArticle, Publisher, RawArticle
from .normalize import normalize_articles, parse_timestamp
from .pagination import Page, page_window, paginate
from .sorting import sort_articles
from .state import PAGE_SIZES, FacetGroup, QueryState, SortKey
from .url_codec import decode_state, encode_state, parse_query_string, to_query_string

__all__ = [
    "FacetGroup",
    "FacetIndex",
    "FacetListing",
    "FacetOption",
    "NormalizedArticle",
    "PAGE_SIZES",
    "Page",
    "Publisher",
    "QueryResult",
    "QueryState",
    "RawArticle",
    "SortKey",
    "compute_dynamic_counts",
    "compute_facets",
    "decode_state",
    "encode_state",
    "facet_options",
    "filter_articles",
    "normalize_articles",
    "page_window",
    "paginate",
    "parse_query_string",
    "parse_timestamp",
    "run_query",
    "sort_articles",
    "to_query_string",
]
