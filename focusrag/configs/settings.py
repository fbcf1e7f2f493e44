"""
Unified application settings.

Aggregates the model, search and observability groups with the API server
options into a single Settings class, cached for dependency injection.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from focusrag.configs.base import BaseSettings
from focusrag.configs.llm import LLMSettings
from focusrag.configs.observability import ObservabilitySettings
from focusrag.configs.search import SearchSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    api_host: str = Field(default="0.0.0.0", description="Bind address for the API server")
    api_port: int = Field(default=8000, gt=0, description="Port for the API server")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    # Aggregated settings
    llm: LLMSettings = Field(default_factory=LLMSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables and .env are read once; later calls return the
    cached instance.

    Returns:
        Settings: Application settings instance

    Usage:
        from focusrag.configs import get_settings
        settings = get_settings()
    """
    return Settings()
