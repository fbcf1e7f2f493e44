"""
Focus-mode search pipeline.

Runs rewrite, search, rerank and generation for one request and reports
progress as typed events. Every focus mode is the same pipeline driven by
a different FocusModeConfig.

Dependencies: focusrag.core.pipeline, focusrag.core.retrieval, focusrag.core.capabilities
System role: Request-level orchestration of the retrieval pipeline
"""

import logging
import time
from enum import Enum

from langchain_core.documents import Document

from focusrag.core.capabilities import (
    EmbeddingCapability,
    LanguageModelCapability,
    SearchCapability,
)
from focusrag.core.exceptions import PipelineFailureError
from focusrag.core.focus_modes.config import FocusModeConfig
from focusrag.core.pipeline.answer_generator import AnswerGenerator
from focusrag.core.pipeline.event_stream import EventStream
from focusrag.core.pipeline.query_rewriter import QueryRewriter
from focusrag.core.retrieval.reranker import DocumentReranker
from focusrag.models.chat import ChatMessage
from focusrag.models.document import result_to_document
from focusrag.models.streaming import EndEvent, ErrorEvent, ResponseEvent, SourcesEvent

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error has occurred please try again later"


class PipelineStage(str, Enum):
    """Pipeline state machine."""

    START = "start"
    REWRITING = "rewriting"
    SEARCHING = "searching"
    RERANKING = "reranking"
    GENERATING = "generating"
    DONE = "done"
    FAILED = "failed"


class SearchPipeline:
    """
    Answers one query in one focus mode.

    An instance handles exactly one request. Failures in any stage end the
    run with a single ErrorEvent; the cause is logged and kept on
    ``failure``.

    Example:
        >>> pipeline = SearchPipeline(get_focus_mode("webSearch"), llm, embeddings, search)
        >>> async with pipeline.stream("What is Docker?", history=[]) as events:
        ...     async for event in events:
        ...         print(event.to_dict())
    """

    def __init__(
        self,
        mode: FocusModeConfig,
        llm: LanguageModelCapability,
        embeddings: EmbeddingCapability,
        search: SearchCapability,
        temperature: float | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            mode: Focus mode configuration
            llm: Language model capability
            embeddings: Embedding capability (unused when the mode skips reranking)
            search: Search capability (unused when the mode skips retrieval)
            temperature: Optional per-call temperature for answer generation
        """
        self._mode = mode
        self._search = search
        self._rewriter = (
            QueryRewriter(llm, mode.rewrite_prompt, sentinel=mode.sentinel)
            if mode.retrieval and mode.rewrite_prompt is not None
            else None
        )
        self._reranker = DocumentReranker(embeddings) if mode.rerank else None
        self._generator = AnswerGenerator(llm, mode.answer_prompt, temperature=temperature)

        self.stage = PipelineStage.START
        self.failure: PipelineFailureError | None = None
        self.timings: dict[str, float] = {}
        self._stage_started = time.perf_counter()
        self._used = False

    @property
    def mode(self) -> FocusModeConfig:
        return self._mode

    def stream(self, query: str, history: list[ChatMessage] | None = None) -> EventStream:
        """
        Start answering a query.

        Args:
            query: Raw user query
            history: Prior conversation, oldest first (not modified)

        Returns:
            EventStream: Sources? Response* (End | Error)

        Raises:
            RuntimeError: If this pipeline already handled a request
        """
        if self._used:
            raise RuntimeError("SearchPipeline handles exactly one request; create a new instance")
        self._used = True
        history = list(history or [])
        return EventStream(lambda events: self._run(query, history, events))

    def _enter(self, stage: PipelineStage) -> None:
        now = time.perf_counter()
        self.timings[self.stage.value] = (now - self._stage_started) * 1000
        self.stage = stage
        self._stage_started = now

    async def _run(self, query: str, history: list[ChatMessage], events: EventStream) -> None:
        self._stage_started = time.perf_counter()
        logger.info(f"{__name__}:_run - START mode={self._mode.name}, query_len={len(query)}")
        try:
            documents: list[Document] = []
            if self._mode.retrieval:
                documents = await self._retrieve(query, history)
                await events.emit(SourcesEvent(documents=documents))

            self._enter(PipelineStage.GENERATING)
            async for chunk in self._generator.generate(query, history, documents):
                await events.emit(ResponseEvent(text=chunk))
        except Exception as e:
            failed_stage = self.stage
            self._enter(PipelineStage.FAILED)
            self.failure = PipelineFailureError(failed_stage.value, e)
            logger.exception(
                f"{__name__}:_run - FAILED mode={self._mode.name}, stage={failed_stage.value}: "
                f"{type(e).__name__}: {e}"
            )
            await events.emit(ErrorEvent(message=GENERIC_ERROR_MESSAGE))
            return

        self._enter(PipelineStage.DONE)
        logger.info(f"{__name__}:_run - DONE mode={self._mode.name}, timings_ms={self._format_timings()}")
        await events.emit(EndEvent())

    async def _retrieve(self, query: str, history: list[ChatMessage]) -> list[Document]:
        """Rewrite, search and rerank. Returns the final context documents."""
        search_query = query
        if self._rewriter is not None:
            self._enter(PipelineStage.REWRITING)
            rewrite = await self._rewriter.rewrite(query, history)
            if rewrite.is_not_needed:
                return []
            search_query = rewrite.query

        self._enter(PipelineStage.SEARCHING)
        response = await self._search.search(
            search_query,
            language=self._mode.language,
            engines=list(self._mode.engines) or None,
        )
        documents = [
            result_to_document(result, fallback_to_title=self._mode.content_fallback_to_title)
            for result in response.results
        ]
        logger.info(f"{__name__}:_retrieve - Search returned {len(documents)} documents")

        if self._reranker is None:
            if self._mode.result_limit is not None:
                documents = documents[: self._mode.result_limit]
            return documents

        self._enter(PipelineStage.RERANKING)
        return await self._reranker.rerank(
            search_query,
            documents,
            threshold=self._mode.similarity_threshold,
            limit=self._mode.result_limit,
        )

    def _format_timings(self) -> str:
        return ", ".join(f"{stage}={ms:.0f}" for stage, ms in self.timings.items())
