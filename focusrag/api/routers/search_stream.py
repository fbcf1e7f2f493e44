"""
WebSocket streaming search endpoint.

Provides real-time pipeline events for focus-mode answers over WebSocket.
The socket is read while a search streams, so a disconnect cancels the
pipeline in whatever stage it is in.

Routes: WS /ws/search

Dependencies: focusrag.application.services.search_service
System role: WebSocket streaming HTTP API
"""

import asyncio
import json
import logging
from contextlib import aclosing

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from focusrag.api.deps import get_search_service
from focusrag.application.services import SearchService
from focusrag.core.exceptions import FocusModeNotFoundError
from focusrag.core.pipeline import SearchPipeline
from focusrag.models.chat import SearchRequest
from focusrag.models.streaming import ErrorEvent
from focusrag.observability.correlation import correlation_scope
from focusrag.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)
router = APIRouter(tags=["streaming"])


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json(ErrorEvent(message=message).to_dict())


def _message_text(message: dict) -> str:
    """Text of a received ASGI message; raises on disconnect."""
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    return message.get("text") or ""


async def _forward_events(
    websocket: WebSocket,
    search_service: SearchService,
    request: SearchRequest,
    pipeline: SearchPipeline,
) -> None:
    with correlation_scope():
        log_with_context(logger, logging.INFO, "Starting search stream", focus_mode=request.focus_mode)
        async with aclosing(
            search_service.stream_search(
                query=request.query,
                focus_mode=request.focus_mode,
                history=request.history,
                pipeline=pipeline,
            )
        ) as events:
            async for event in events:
                await websocket.send_json(event.to_dict())


async def _stream_while_listening(websocket: WebSocket, stream: asyncio.Task) -> asyncio.Task:
    """
    Wait for a stream to finish while reading the socket.

    Pings are answered mid-stream and other messages are rejected. A
    disconnect cancels the stream.

    Returns:
        asyncio.Task: Pending receive, to be consumed as the next message

    Raises:
        WebSocketDisconnect: Client left while the stream was running
    """
    receive = asyncio.create_task(websocket.receive())
    try:
        while not stream.done():
            done, _ = await asyncio.wait({stream, receive}, return_when=asyncio.FIRST_COMPLETED)
            if receive not in done:
                continue

            message = receive.result()
            if message["type"] == "websocket.disconnect":
                logger.info(f"{__name__}:_stream_while_listening - Client left mid-stream, cancelling search")
                stream.cancel()
                await asyncio.wait({stream})
                _message_text(message)

            try:
                data = json.loads(_message_text(message))
            except json.JSONDecodeError:
                data = None
            if isinstance(data, dict) and data.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
            else:
                await _send_error(websocket, "Search already in progress")
            receive = asyncio.create_task(websocket.receive())

        stream.result()
    except BaseException:
        receive.cancel()
        stream.cancel()
        raise
    return receive


@router.websocket("/ws/search")
async def websocket_search(
    websocket: WebSocket,
    search_service: SearchService = Depends(get_search_service),
) -> None:
    """
    WebSocket endpoint for streaming focus-mode answers.

    Client sends:
        {"type": "message", "content": "...", "focus_mode": "webSearch", "history": [...]}
        {"type": "ping"}

    Server sends:
        {"type": "sources", "data": [...]}
        {"type": "response", "data": "..."}
        {"type": "end"}
        {"type": "error", "data": "..."}
        {"type": "pong"}

    One search runs at a time; messages other than ping sent while it
    streams get an error event.

    Args:
        websocket: WebSocket connection
        search_service: Injected SearchService
    """
    await websocket.accept()
    logger.info(f"{__name__}:websocket_search - Connection established client={websocket.client}")

    pending_receive: asyncio.Task | None = None
    try:
        while True:
            receive = pending_receive or asyncio.create_task(websocket.receive())
            pending_receive = None
            raw_data = _message_text(await receive)

            try:
                data = json.loads(raw_data)
            except json.JSONDecodeError as e:
                log_with_context(logger, logging.WARNING, "Failed to parse JSON", error_msg=str(e), raw_data=raw_data)
                await _send_error(websocket, "Invalid message format")
                continue

            message_type = data.get("type") if isinstance(data, dict) else None

            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type != "message":
                log_with_context(logger, logging.WARNING, "Unknown message type received", message_type=message_type)
                await _send_error(websocket, "Invalid message type")
                continue

            try:
                request = SearchRequest(
                    query=data.get("content") or "",
                    focus_mode=data.get("focus_mode") or "webSearch",
                    history=data.get("history") or [],
                )
            except ValidationError as e:
                log_with_context(logger, logging.WARNING, "Invalid search message", error_count=e.error_count())
                await _send_error(websocket, "Invalid message content")
                continue

            try:
                pipeline = search_service.create_pipeline(request.focus_mode)
            except FocusModeNotFoundError as e:
                log_with_context(logger, logging.WARNING, "Unknown focus mode", focus_mode=request.focus_mode)
                await _send_error(websocket, e.message)
                continue

            stream = asyncio.create_task(_forward_events(websocket, search_service, request, pipeline))
            pending_receive = await _stream_while_listening(websocket, stream)

    except WebSocketDisconnect:
        logger.info(f"{__name__}:websocket_search - Client disconnected")
    except Exception as e:
        log_exception_with_context(logger, "Unexpected error in WebSocket handler", e)
        raise
    finally:
        if pending_receive is not None:
            pending_receive.cancel()
