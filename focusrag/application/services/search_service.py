"""
Search service bridging API requests to focus-mode pipelines.

Resolves the focus mode, builds one SearchPipeline per request over the
shared capabilities, and exposes media search and suggestions.

Dependencies: focusrag.core.pipeline, focusrag.core.focus_modes, focusrag.core.media_search,
    focusrag.core.suggestions
System role: Search service orchestration layer
"""

import logging
from collections.abc import AsyncGenerator

from focusrag.core.capabilities import (
    EmbeddingCapability,
    LanguageModelCapability,
    SearchCapability,
)
from focusrag.core.focus_modes import (
    FocusModeConfig,
    get_focus_mode,
    list_focus_modes,
    with_registry_prompts,
)
from focusrag.core.media_search import MediaSearch
from focusrag.core.pipeline import SearchPipeline
from focusrag.core.suggestions import SuggestionGenerator
from focusrag.models.chat import ChatMessage, FocusModeInfo
from focusrag.models.media import ImageResult, VideoResult
from focusrag.models.streaming import PipelineEvent

logger = logging.getLogger(__name__)


class SearchService:
    """
    Search service for focus-mode question answering.

    Holds the process-wide capabilities; every request gets its own pipeline.
    """

    def __init__(
        self,
        llm: LanguageModelCapability,
        embeddings: EmbeddingCapability,
        search: SearchCapability,
        default_language: str | None = None,
        use_prompt_registry: bool = False,
        prompt_label: str | None = None,
    ) -> None:
        """
        Initialize search service.

        Args:
            llm: Language model capability
            embeddings: Embedding capability
            search: Search capability
            default_language: Language filter for modes that do not set one
            use_prompt_registry: Resolve prompts through the Langfuse registry
            prompt_label: Registry label filter
        """
        self.llm = llm
        self.embeddings = embeddings
        self.search = search
        self.default_language = default_language
        self.use_prompt_registry = use_prompt_registry
        self.prompt_label = prompt_label
        self._media = MediaSearch(llm, search)
        self._suggestions = SuggestionGenerator(llm)

    def resolve_mode(self, focus_mode: str) -> FocusModeConfig:
        """
        Resolve a focus mode with defaults and registry prompts applied.

        Raises:
            FocusModeNotFoundError: Unknown focus mode
        """
        mode = get_focus_mode(focus_mode)
        if self.use_prompt_registry:
            mode = with_registry_prompts(mode, label=self.prompt_label)
        if mode.retrieval and mode.language is None and self.default_language:
            mode = mode.model_copy(update={"language": self.default_language})
        return mode

    def create_pipeline(self, focus_mode: str) -> SearchPipeline:
        """
        Build a single-use pipeline for a focus mode.

        Raises:
            FocusModeNotFoundError: Unknown focus mode
        """
        return SearchPipeline(
            self.resolve_mode(focus_mode),
            llm=self.llm,
            embeddings=self.embeddings,
            search=self.search,
        )

    async def stream_search(
        self,
        query: str,
        focus_mode: str,
        history: list[ChatMessage],
        pipeline: SearchPipeline | None = None,
    ) -> AsyncGenerator[PipelineEvent, None]:
        """
        Stream pipeline events for one query.

        Closing this generator early cancels the pipeline run.

        Args:
            query: User query
            focus_mode: Focus mode name
            history: Prior conversation
            pipeline: Pre-built pipeline (lets callers validate the mode first)

        Yields:
            PipelineEvent: Sources?, Response*, then End or Error
        """
        pipeline = pipeline or self.create_pipeline(focus_mode)
        logger.info(f"{__name__}:stream_search - START focus_mode={focus_mode}, history_len={len(history)}")

        event_count = 0
        async with pipeline.stream(query, history) as events:
            async for event in events:
                event_count += 1
                yield event

        logger.info(
            f"{__name__}:stream_search - DONE focus_mode={focus_mode}, events={event_count}, "
            f"stage={pipeline.stage.value}"
        )

    async def search_images(self, query: str, history: list[ChatMessage]) -> list[ImageResult]:
        """Find up to 10 images for the query."""
        return await self._media.search_images(query, history)

    async def search_videos(self, query: str, history: list[ChatMessage]) -> list[VideoResult]:
        """Find up to 10 videos for the query."""
        return await self._media.search_videos(query, history)

    async def generate_suggestions(self, history: list[ChatMessage]) -> list[str]:
        """Generate follow-up suggestions for a conversation."""
        return await self._suggestions.generate(history)

    @staticmethod
    def describe_focus_modes() -> list[FocusModeInfo]:
        """Public description of every focus mode."""
        return [
            FocusModeInfo(
                name=mode.name,
                source_label=mode.source_label,
                engines=list(mode.engines),
                retrieval=mode.retrieval,
                rerank=mode.rerank,
            )
            for mode in list_focus_modes()
        ]
