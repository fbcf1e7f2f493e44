"""
Follow-up suggestion endpoint.

Routes: POST /suggestions

Dependencies: focusrag.application.services.search_service
System role: Suggestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from focusrag.api.deps import get_search_service
from focusrag.application.services import SearchService
from focusrag.core.exceptions import CapabilityError
from focusrag.models.chat import SuggestionRequest, SuggestionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("", response_model=SuggestionResponse)
async def generate_suggestions(
    request: SuggestionRequest,
    search_service: SearchService = Depends(get_search_service),
) -> SuggestionResponse:
    """
    Generate follow-up suggestions for a conversation.

    Raises:
        HTTPException(502): Language model unavailable
    """
    try:
        suggestions = await search_service.generate_suggestions(request.history)
    except CapabilityError as e:
        logger.error(f"{__name__}:generate_suggestions - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail="Suggestions are currently unavailable")
    return SuggestionResponse(suggestions=suggestions)
