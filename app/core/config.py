"""
Configuration settings for the Paged Resources Service.

Settings are read from the environment (and an optional ``.env`` file).
Nested sections use ``__`` as delimiter, e.g. ``PAGINATION__MAX_PAGE_SIZE=500``.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseModel):
    """HTTP server settings."""
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


class CorsSettings(BaseModel):
    """CORS middleware settings."""
    enabled: bool = True
    allowed_origins: List[str] = ["*"]
    allow_credentials: bool = False
    allowed_methods: List[str] = ["GET", "OPTIONS"]
    allowed_headers: List[str] = ["*"]


class PaginationSettings(BaseModel):
    """Pagination and link generation settings."""
    one_indexed_parameters: bool = False
    base_uri: Optional[str] = None
    force_first_and_last_rels: bool = False
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=2000, ge=1)
    page_parameter: str = "page"
    size_parameter: str = "size"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = "Paged Resources Service"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"

    app: AppSettings = AppSettings()
    cors: CorsSettings = CorsSettings()
    pagination: PaginationSettings = PaginationSettings()


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
