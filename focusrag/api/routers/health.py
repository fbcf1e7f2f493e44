"""
Health check API endpoints.

Routes: GET /health, GET /health/search

Dependencies: focusrag.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from focusrag.api.deps import get_settings_dependency
from focusrag.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/search", response_model=HealthResponse)
async def health_check_search(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Search backend configuration check."""
    return HealthResponse(
        status="healthy",
        message=f"Search backend configured at {settings.search.base_url}",
    )
