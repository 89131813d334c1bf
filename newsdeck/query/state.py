"""Query state: the serializable description of what is displayed."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

PAGE_SIZES: Sequence[int] = (10, 20, 50)
DEFAULT_PAGE_SIZE = 20


class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PUBLISHER_AZ = "publisher_az"
    TITLE_AZ = "title_az"


class FacetGroup(str, Enum):
    """Filterable dimensions; the value is the group's query parameter name."""

    CATEGORY = "category"
    PUBLISHER = "publishers"
    LANGUAGE = "languages"
    TAG = "tags"


class QueryState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    search_text: str = ""
    sort: SortKey = SortKey.NEWEST
    page: int = Field(default=1, ge=1)
    page_size: int = DEFAULT_PAGE_SIZE
    categories: Set[str] = Field(default_factory=set)
    publishers: Set[str] = Field(default_factory=set)
    languages: Set[str] = Field(default_factory=set)
    tags: Set[str] = Field(default_factory=set)
    tags_expanded: bool = False

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        if value not in PAGE_SIZES:
            raise ValueError(f"page_size must be one of {tuple(PAGE_SIZES)}")
        return value

    def selection(self, group: FacetGroup) -> Set[str]:
        """Return the live selection set backing *group*."""

        if group is FacetGroup.CATEGORY:
            return self.categories
        if group is FacetGroup.PUBLISHER:
            return self.publishers
        if group is FacetGroup.LANGUAGE:
            return self.languages
        return self.tags

    def normalized_search(self) -> str:
        return self.search_text.strip().lower()

    def has_filters(self) -> bool:
        return bool(
            self.normalized_search()
            or self.categories
            or self.publishers
            or self.languages
            or self.tags
        )
