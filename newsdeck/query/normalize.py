"""Turn raw article records into the normalized in-memory dataset."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Iterable, List

from .models import NormalizedArticle, RawArticle

SEARCH_SEPARATOR = " • "


def parse_timestamp(value: object) -> float:
    """Parse an ISO-8601 string into epoch milliseconds, NaN if unparsable."""

    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if not text:
        return math.nan
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.timestamp() * 1000.0
    except (ValueError, OverflowError):
        return math.nan


def build_search_blob(*parts: str) -> str:
    return SEARCH_SEPARATOR.join(part for part in parts if part).lower()


def _as_raw(record: Any) -> RawArticle:
    if isinstance(record, RawArticle):
        return record
    if isinstance(record, Mapping):
        return RawArticle.model_validate(dict(record))
    return RawArticle()


def normalize_article(record: Any) -> NormalizedArticle:
    raw = _as_raw(record)
    publisher_name = (raw.publisher.name if raw.publisher else None) or ""
    tags = tuple(raw.tags)
    return NormalizedArticle(
        title=raw.title or "",
        description=raw.description or "",
        url=raw.url or "",
        image_url=raw.image_url or "",
        author=raw.author or "",
        category=raw.category or "",
        language=raw.language or "",
        country=raw.country or "",
        published_at=raw.published_at or "",
        updated_at=raw.updated_at or "",
        reading_time_minutes=raw.reading_time_minutes,
        publisher=raw.publisher,
        publisher_name=publisher_name,
        tags=tags,
        published_ts=parse_timestamp(raw.published_at),
        updated_ts=parse_timestamp(raw.updated_at),
        search_blob=build_search_blob(
            raw.title or "",
            raw.description or "",
            publisher_name,
            " ".join(tags),
        ),
    )


def normalize_articles(records: Iterable[Any]) -> List[NormalizedArticle]:
    """Normalize *records* in order; never raises on missing or malformed fields."""

    return [normalize_article(record) for record in records]
