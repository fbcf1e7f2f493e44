"""
Pipeline event stream.

Async iterator fed by a producer task through an asyncio.Queue. The
producer starts on first iteration; closing the stream cancels it, which
abandons any in-flight search, embedding or model call.

Dependencies: asyncio
System role: Typed event channel between a pipeline run and its consumer
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from focusrag.models.streaming import PipelineEvent

logger = logging.getLogger(__name__)

_DONE = object()


class EventStream:
    """
    Events of one pipeline run, consumed with ``async for``.

    Example:
        >>> async with pipeline.stream(query, history) as events:
        ...     async for event in events:
        ...         await websocket.send_json(event.to_dict())
    """

    def __init__(self, producer: Callable[["EventStream"], Awaitable[None]]) -> None:
        """
        Initialize the stream.

        Args:
            producer: Coroutine function that emits events into this stream
        """
        self._producer = producer
        self._queue: asyncio.Queue = asyncio.Queue()
        self._task: asyncio.Task | None = None
        self._finished = False

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def cancelled(self) -> bool:
        """Whether the producer was cancelled before it finished."""
        return self._task is not None and self._task.cancelled()

    async def emit(self, event: PipelineEvent) -> None:
        """Queue an event for the consumer."""
        await self._queue.put(event)

    async def _run(self) -> None:
        try:
            await self._producer(self)
        finally:
            self._queue.put_nowait(_DONE)

    def __aiter__(self) -> "EventStream":
        return self

    async def __anext__(self) -> PipelineEvent:
        if self._finished:
            raise StopAsyncIteration
        if self._task is None:
            self._task = asyncio.create_task(self._run())

        item = await self._queue.get()
        if item is _DONE:
            self._finished = True
            # Surfaces producer bugs; pipeline failures arrive as ErrorEvents.
            if not self._task.cancelled():
                await self._task
            raise StopAsyncIteration
        return item

    async def aclose(self) -> None:
        """Stop consuming and cancel the producer if it is still running."""
        self._finished = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.wait([self._task])
            logger.info(f"{__name__}:aclose - Producer cancelled")

    async def __aenter__(self) -> "EventStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
