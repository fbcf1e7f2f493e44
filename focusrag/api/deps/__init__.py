"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_search_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_search_service",
    "get_service_cache",
    "get_settings_dependency",
]
