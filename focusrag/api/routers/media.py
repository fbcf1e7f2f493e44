"""
Image and video search endpoints.

Routes:
- POST /images - Images for the latest question
- POST /videos - Videos for the latest question

Dependencies: focusrag.application.services.search_service
System role: Media search HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from focusrag.api.deps import get_search_service
from focusrag.application.services import SearchService
from focusrag.core.exceptions import CapabilityError
from focusrag.models.chat import (
    ImageSearchResponse,
    MediaSearchRequest,
    VideoSearchResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["media"])


@router.post("/images", response_model=ImageSearchResponse)
async def search_images(
    request: MediaSearchRequest,
    search_service: SearchService = Depends(get_search_service),
) -> ImageSearchResponse:
    """
    Find images related to the conversation's latest question.

    Raises:
        HTTPException(502): Model or search backend unavailable
    """
    try:
        images = await search_service.search_images(request.query, request.history)
    except CapabilityError as e:
        logger.error(f"{__name__}:search_images - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail="Image search is currently unavailable")
    return ImageSearchResponse(images=images)


@router.post("/videos", response_model=VideoSearchResponse)
async def search_videos(
    request: MediaSearchRequest,
    search_service: SearchService = Depends(get_search_service),
) -> VideoSearchResponse:
    """
    Find videos related to the conversation's latest question.

    Raises:
        HTTPException(502): Model or search backend unavailable
    """
    try:
        videos = await search_service.search_videos(request.query, request.history)
    except CapabilityError as e:
        logger.error(f"{__name__}:search_videos - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail="Video search is currently unavailable")
    return VideoSearchResponse(videos=videos)
