"""Article records consumed and produced by the query engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        try:
            return str(value)
        except ValueError:
            # int digit limit
            return None
    return None


class Publisher(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    url: Optional[str] = None
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")

    @field_validator("name", "url", "logo_url", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)


class RawArticle(BaseModel):
    """A news record as delivered by the dataset source.

    Every field is optional and loosely typed input is coerced instead of
    rejected, so validating any mapping succeeds.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    author: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    country: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    reading_time_minutes: Optional[float] = Field(default=None, alias="readingTimeMinutes")
    tags: List[str] = Field(default_factory=list)
    publisher: Optional[Publisher] = None

    @field_validator(
        "title",
        "description",
        "url",
        "image_url",
        "author",
        "category",
        "language",
        "country",
        "published_at",
        "updated_at",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)

    @field_validator("reading_time_minutes", mode="before")
    @classmethod
    def coerce_reading_time(cls, value: Any) -> Optional[float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        try:
            number = float(value)
        except OverflowError:
            return None
        if not math.isfinite(number):
            return None
        return number

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        tags: List[str] = []
        for item in value:
            text = _coerce_text(item)
            if text is not None:
                tags.append(text)
        return tags

    @field_validator("publisher", mode="before")
    @classmethod
    def coerce_publisher(cls, value: Any) -> Any:
        if isinstance(value, (dict, Publisher)):
            return value
        return None


def sortable_ts(value: float) -> float:
    """Return *value* for numeric ordering, treating NaN as epoch 0."""

    if math.isnan(value):
        return 0.0
    return value


@dataclass(frozen=True, slots=True)
class NormalizedArticle:
    """An article with the derived fields used for filtering and sorting."""

    title: str = ""
    description: str = ""
    url: str = ""
    image_url: str = ""
    author: str = ""
    category: str = ""
    language: str = ""
    country: str = ""
    published_at: str = ""
    updated_at: str = ""
    reading_time_minutes: Optional[float] = None
    publisher: Optional[Publisher] = None
    publisher_name: str = ""
    tags: Sequence[str] = field(default_factory=tuple)
    published_ts: float = math.nan
    updated_ts: float = math.nan
    search_blob: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialize back into the camelCase shape of the source record."""

        publisher = None
        if self.publisher is not None:
            publisher = self.publisher.model_dump(by_alias=True, exclude_none=True)
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "imageUrl": self.image_url,
            "author": self.author,
            "category": self.category,
            "language": self.language,
            "country": self.country,
            "publishedAt": self.published_at,
            "updatedAt": self.updated_at,
            "readingTimeMinutes": self.reading_time_minutes,
            "tags": list(self.tags),
            "publisher": publisher,
        }
