"""Serialize query state to flat URL parameters and back.

Wire keys: ``q``, ``sort``, ``page``, ``pageSize``, ``category``,
``publishers``, ``languages``, ``tags``. Selection sets are joined with
commas in sorted order so the encoding is canonical. Decoding never
fails: every garbled or unknown value falls back to its default.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Dict, Optional, Set
from urllib.parse import parse_qsl, urlencode

from .state import DEFAULT_PAGE_SIZE, PAGE_SIZES, FacetGroup, QueryState, SortKey

LIST_SEPARATOR = ","
# plain ASCII decimal, no digit-group underscores
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def encode_state(state: QueryState) -> Dict[str, str]:
    params: Dict[str, str] = {}
    search = state.search_text.strip()
    if search:
        params["q"] = search
    if state.sort is not SortKey.NEWEST:
        params["sort"] = state.sort.value
    params["page"] = str(state.page)
    params["pageSize"] = str(state.page_size)
    for group in FacetGroup:
        # commas cannot be escaped, so labels containing one are split
        tokens: Set[str] = set()
        for label in state.selection(group):
            tokens |= _parse_set(label)
        if tokens:
            params[group.value] = LIST_SEPARATOR.join(sorted(tokens))
    return params


def _first(params: Mapping[str, object], key: str) -> Optional[str]:
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    text = value.strip()
    if not _NUMBER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        pass
    number = float(text)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return None


def _parse_set(value: Optional[str]) -> Set[str]:
    if not value:
        return set()
    return {token.strip() for token in value.split(LIST_SEPARATOR) if token.strip()}


def decode_state(
    params: Mapping[str, object],
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> QueryState:
    """Rebuild a QueryState from *params*; ``tags_expanded`` is never restored."""

    sort_raw = _first(params, "sort")
    try:
        sort = SortKey(sort_raw) if sort_raw is not None else SortKey.NEWEST
    except ValueError:
        sort = SortKey.NEWEST

    page = _parse_int(_first(params, "page"))
    if page is None or page < 1:
        page = 1

    page_size = _parse_int(_first(params, "pageSize"))
    if page_size not in PAGE_SIZES:
        page_size = default_page_size if default_page_size in PAGE_SIZES else DEFAULT_PAGE_SIZE

    return QueryState(
        search_text=_first(params, "q") or "",
        sort=sort,
        page=page,
        page_size=page_size,
        categories=_parse_set(_first(params, FacetGroup.CATEGORY.value)),
        publishers=_parse_set(_first(params, FacetGroup.PUBLISHER.value)),
        languages=_parse_set(_first(params, FacetGroup.LANGUAGE.value)),
        tags=_parse_set(_first(params, FacetGroup.TAG.value)),
    )


def parse_query_string(query: str) -> Dict[str, str]:
    """Split a raw query string into a flat mapping; the first value of a key wins."""

    params: Dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def to_query_string(params: Mapping[str, str]) -> str:
    return urlencode(list(params.items()))
