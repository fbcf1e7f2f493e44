"""
Focus mode listing endpoint.

Routes: GET /focus-modes

Dependencies: focusrag.application.services.search_service
System role: Focus mode discovery HTTP API
"""

from fastapi import APIRouter

from focusrag.application.services import SearchService
from focusrag.models.chat import FocusModeInfo

router = APIRouter(prefix="/focus-modes", tags=["focus-modes"])


@router.get("", response_model=list[FocusModeInfo])
async def list_focus_modes() -> list[FocusModeInfo]:
    """List every supported focus mode."""
    return SearchService.describe_focus_modes()
