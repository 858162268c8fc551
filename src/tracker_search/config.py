"""Centralized configuration for tracker-search using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from ``TRACKER_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Indexing
    word_separators: str = Field(
        default="_-",
        description="Characters treated as spaces when splitting entity names into words",
    )
    split_names: bool = Field(default=True, description="Split names on spaces for the generic name index")

    # Querying
    filter_marker: str = Field(
        default="=",
        min_length=1,
        max_length=1,
        description="Terms containing this character are status filters and never narrow results",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"debug", "info", "warning", "error", "critical"}:
            raise ValueError(f"Unsupported log level: {value!r}")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings()
