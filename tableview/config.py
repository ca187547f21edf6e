"""
Configuration settings for the table view engine.

Uses Pydantic Settings to load environment variables (or a `.env` file) for
logging, the allowed page sizes, and the page-reset policy applied when the
search text or a filter changes.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PAGE_SIZE_OPTIONS = [2, 5, 10, 25]


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Data source used by the CLI when --data is not given
    data_path: Optional[str] = Field(None, alias="DATA_PATH")

    # Paging
    page_size_options: List[int] = Field(
        default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS), alias="PAGE_SIZE_OPTIONS"
    )
    default_page_size: Optional[int] = Field(None, alias="DEFAULT_PAGE_SIZE")
    reset_page_on_query_change: bool = Field(True, alias="RESET_PAGE_ON_QUERY_CHANGE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("page_size_options")
    @classmethod
    def _check_page_size_options(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("page_size_options must not be empty")
        if any(size <= 0 for size in value):
            raise ValueError("page sizes must be positive")
        return value

    @model_validator(mode="after")
    def _resolve_default_page_size(self) -> "Settings":
        if self.default_page_size is None:
            self.default_page_size = self.page_size_options[0]
        elif self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size={self.default_page_size} is not one of "
                f"page_size_options={self.page_size_options}"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_PAGE_SIZE_OPTIONS", "Settings", "get_settings"]
