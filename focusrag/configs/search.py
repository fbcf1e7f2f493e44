"""
Search backend configuration settings.

Settings for the SearxNG metasearch instance queried by every
retrieval focus mode.

Dependencies: pydantic, pydantic_settings
System role: Search gateway configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from focusrag.configs.base import BaseSettings


class SearchSettings(BaseSettings):
    """SearxNG connection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SEARXNG_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the SearxNG instance",
    )
    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Maximum wait for a single search request",
    )
    language: str = Field(
        default="en",
        description="Default language filter forwarded to SearxNG",
    )
