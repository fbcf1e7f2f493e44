"""API routers."""

from .focus_modes import router as focus_modes_router
from .health import router as health_router
from .media import router as media_router
from .search import router as search_router
from .search_stream import router as search_stream_router
from .suggestions import router as suggestions_router

__all__ = [
    "focus_modes_router",
    "health_router",
    "media_router",
    "search_router",
    "search_stream_router",
    "suggestions_router",
]
