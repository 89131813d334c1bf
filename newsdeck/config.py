"""Configuration for the news browser service."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .query.state import DEFAULT_PAGE_SIZE, PAGE_SIZES


class NewsDeckConfig(BaseSettings):
    """Settings read from ``NEWSDECK_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="NEWSDECK_", validate_assignment=True)

    data_source: str = "articles.json"
    default_page_size: int = DEFAULT_PAGE_SIZE
    tags_top_n: int = Field(default=18, ge=1)
    page_window_radius: int = Field(default=2, ge=0)
    search_debounce_ms: int = Field(default=300, ge=0)
    fetch_timeout: float = Field(default=20.0, gt=0)

    @field_validator("default_page_size")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        if value not in PAGE_SIZES:
            raise ValueError(f"default_page_size must be one of {tuple(PAGE_SIZES)}")
        return value

    @field_validator("data_source")
    @classmethod
    def validate_data_source(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("data_source must not be empty")
        return value
