"""
Test suite for EventStream.

System role: Verification of the producer/consumer event channel
"""

import asyncio

import pytest

from focusrag.core.pipeline.event_stream import EventStream
from focusrag.models.streaming import EndEvent, ResponseEvent


class TestEventStream:
    """Test suite for EventStream iteration and closing."""

    @pytest.mark.asyncio
    async def test_yields_events_in_emit_order(self) -> None:
        async def producer(events: EventStream) -> None:
            await events.emit(ResponseEvent(text="a"))
            await events.emit(ResponseEvent(text="b"))
            await events.emit(EndEvent())

        stream = EventStream(producer)

        received = [event async for event in stream]

        assert received == [ResponseEvent(text="a"), ResponseEvent(text="b"), EndEvent()]

    @pytest.mark.asyncio
    async def test_producer_starts_on_first_iteration(self) -> None:
        started = []

        async def producer(events: EventStream) -> None:
            started.append(True)
            await events.emit(EndEvent())

        stream = EventStream(producer)
        await asyncio.sleep(0)

        assert not stream.started
        assert started == []
        assert await stream.__anext__() == EndEvent()

    @pytest.mark.asyncio
    async def test_aclose_cancels_running_producer(self) -> None:
        # Arrange
        cancelled = asyncio.Event()

        async def producer(events: EventStream) -> None:
            await events.emit(ResponseEvent(text="first"))
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                cancelled.set()
                raise

        stream = EventStream(producer)

        # Act
        first = await stream.__anext__()
        await stream.aclose()

        # Assert
        assert first == ResponseEvent(text="first")
        assert cancelled.is_set()
        assert stream.cancelled
        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()

    @pytest.mark.asyncio
    async def test_context_manager_closes_stream(self) -> None:
        async def producer(events: EventStream) -> None:
            await events.emit(ResponseEvent(text="x"))
            await asyncio.Event().wait()

        async with EventStream(producer) as stream:
            assert await stream.__anext__() == ResponseEvent(text="x")

        assert stream.cancelled

    @pytest.mark.asyncio
    async def test_producer_bug_is_raised_to_consumer(self) -> None:
        async def producer(events: EventStream) -> None:
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError, match="bug"):
            _ = [event async for event in EventStream(producer)]
