"""
Search streaming endpoint.

Routes:
- POST /search/stream - Stream a focus-mode answer using Server-Sent Events (SSE)

Dependencies: focusrag.application.services.search_service
System role: Search HTTP API with streaming support
"""

import json
import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from focusrag.api.deps import get_search_service
from focusrag.application.services import SearchService
from focusrag.core.exceptions import FocusModeNotFoundError
from focusrag.models.chat import SearchRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post("/stream")
async def search_stream(
    request: SearchRequest,
    search_service: SearchService = Depends(get_search_service),
) -> StreamingResponse:
    """Stream a focus-mode answer using Server-Sent Events (SSE).

    SSE Format:
        event: sources
        data: {"type": "sources", "data": [{"page_content": "...", "metadata": {...}}]}

        event: response
        data: {"type": "response", "data": "..."}

        event: end
        data: {"type": "end"}

        event: error
        data: {"type": "error", "data": "..."}

    Args:
        request: SearchRequest with query, focus mode and history
        search_service: Injected SearchService

    Returns:
        StreamingResponse: SSE stream of pipeline events

    Raises:
        HTTPException(404): Unknown focus mode
    """
    logger.info(f"{__name__}:search_stream - START focus_mode={request.focus_mode}")

    try:
        pipeline = search_service.create_pipeline(request.focus_mode)
    except FocusModeNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    async def event_generator() -> AsyncGenerator[str, None]:
        """Generate SSE events from the pipeline stream."""
        async for event in search_service.stream_search(
            query=request.query,
            focus_mode=request.focus_mode,
            history=request.history,
            pipeline=pipeline,
        ):
            # Format as SSE: "event: {type}\ndata: {json}\n\n"
            payload = event.to_dict()
            yield f"event: {payload['type']}\ndata: {json.dumps(payload)}\n\n"

        logger.info(f"{__name__}:search_stream - Stream completed focus_mode={request.focus_mode}")

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )
