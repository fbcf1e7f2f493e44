"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, focusrag.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from focusrag.api.deps.dependencies import get_service_cache
from focusrag.configs import get_settings
from focusrag.core.focus_modes import register_focus_mode_prompts
from focusrag.observability.logger import configure_logging
from focusrag.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    focus_modes_router,
    health_router,
    media_router,
    search_router,
    search_stream_router,
    suggestions_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Registers prompts on startup and closes the shared connection pool
    on shutdown.
    """
    logger = logging.getLogger("uvicorn")
    settings = get_settings()

    # Startup
    if settings.observability.use_prompt_registry:
        register_focus_mode_prompts(
            model_id=settings.llm.chat_model,
            temperature=settings.llm.temperature,
            labels=[settings.observability.prompt_label] if settings.observability.prompt_label else None,
        )

    yield

    # Shutdown
    await get_service_cache().aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="FocusRAG API",
        description="Focus-mode web search with reranked, cited, streamed answers",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(focus_modes_router, prefix="/api/v1")
    app.include_router(search_router, prefix="/api/v1")
    app.include_router(search_stream_router, prefix="/api/v1")
    app.include_router(media_router, prefix="/api/v1")
    app.include_router(suggestions_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "focusrag.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
