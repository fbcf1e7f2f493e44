"""
Dependency injection container.

Caches the process-wide capabilities (shared HTTP connection pool, chat
model, embeddings) and builds the search service from them.

Dependencies: focusrag.configs, focusrag.application, focusrag.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache

import httpx

from focusrag.application.services import SearchService
from focusrag.configs import Settings, get_settings

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached capability and service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._http_client = None
        self._search_client = None
        self._language_model = None
        self._embedding_model = None
        self._search_service = None

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get the shared HTTP connection pool."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.search.timeout_seconds),
            )
        return self._http_client

    @property
    def search_client(self):
        """Get cached SearxNG client."""
        if self._search_client is None:
            from focusrag.boundary.search import SearxngClient

            self._search_client = SearxngClient(
                base_url=self.settings.search.base_url,
                timeout_seconds=self.settings.search.timeout_seconds,
                client=self.http_client,
            )
        return self._search_client

    @property
    def language_model(self):
        """Get cached chat model capability."""
        if self._language_model is None:
            from focusrag.boundary.llm import create_language_model

            self._language_model = create_language_model(self.settings.llm)
        return self._language_model

    @property
    def embedding_model(self):
        """Get cached embedding capability."""
        if self._embedding_model is None:
            from focusrag.boundary.llm import create_embedding_model

            self._embedding_model = create_embedding_model(self.settings.llm)
        return self._embedding_model

    @property
    def search_service(self) -> SearchService:
        """Get cached search service."""
        if self._search_service is None:
            observability = self.settings.observability
            self._search_service = SearchService(
                llm=self.language_model,
                embeddings=self.embedding_model,
                search=self.search_client,
                default_language=self.settings.search.language,
                use_prompt_registry=observability.use_prompt_registry,
                prompt_label=observability.prompt_label,
            )
        return self._search_service

    async def aclose(self) -> None:
        """Close the shared connection pool and drop all cached instances."""
        if self._http_client is not None:
            await self._http_client.aclose()
            logger.info(f"{__name__}:aclose - HTTP connection pool closed")
        self._http_client = None
        self._search_client = None
        self._language_model = None
        self._embedding_model = None
        self._search_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_search_service() -> SearchService:
    """
    Get search service instance.

    Returns:
        SearchService: Shared search service
    """
    return get_service_cache().search_service
