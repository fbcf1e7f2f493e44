"""
Shared test fixtures and configuration for entire test suite.

Provides: stub search, embedding and language model capabilities,
search result factories, and a prompt registry reset
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import asyncio
import math
from collections.abc import AsyncIterator

import pytest
from langchain_core.prompt_values import PromptValue

from focusrag.core.exceptions import EmbeddingUnavailableError
from focusrag.models.document import SearchResponse, SearchResult
from focusrag.observability.prompt_registry import PromptRegistry


class StubLanguageModel:
    """Language model capability returning canned completions and chunks."""

    def __init__(
        self,
        completions: list[str] | None = None,
        chunks: list[str] | None = None,
        complete_error: Exception | None = None,
        stream_error: Exception | None = None,
        stream_error_after: int = 0,
    ) -> None:
        self.completions = list(completions or [])
        self.chunks = list(chunks or [])
        self.complete_error = complete_error
        self.stream_error = stream_error
        self.stream_error_after = stream_error_after
        self.complete_calls: list[PromptValue] = []
        self.stream_calls: list[PromptValue] = []
        self.temperatures: list[float | None] = []

    async def complete(self, prompt: PromptValue, temperature: float | None = None) -> str:
        self.complete_calls.append(prompt)
        self.temperatures.append(temperature)
        if self.complete_error is not None:
            raise self.complete_error
        return self.completions.pop(0)

    async def stream(self, prompt: PromptValue, temperature: float | None = None) -> AsyncIterator[str]:
        self.stream_calls.append(prompt)
        self.temperatures.append(temperature)
        for index, chunk in enumerate(self.chunks):
            if self.stream_error is not None and index == self.stream_error_after:
                raise self.stream_error
            yield chunk
        if self.stream_error is not None and self.stream_error_after >= len(self.chunks):
            raise self.stream_error


class StubEmbeddings:
    """
    Embedding capability producing vectors with chosen cosine similarities.

    The query embeds to [1, 0]; a document whose text maps to s embeds to
    [s, sqrt(1 - s^2)], so its cosine similarity to the query is exactly s.
    """

    def __init__(
        self,
        similarities: dict[str, float] | None = None,
        error: Exception | None = None,
        drop_last: bool = False,
    ) -> None:
        self.similarities = similarities or {}
        self.error = error
        self.drop_last = drop_last
        self.embed_texts_calls: list[list[str]] = []
        self.embed_query_calls: list[str] = []

    async def embed_texts(self, texts: list[str]) -> list[list[float]]:
        self.embed_texts_calls.append(list(texts))
        if self.error is not None:
            raise self.error
        vectors = []
        for text in texts:
            s = self.similarities.get(text, 0.0)
            vectors.append([s, math.sqrt(max(0.0, 1.0 - s * s))])
        return vectors[:-1] if self.drop_last else vectors

    async def embed_query(self, text: str) -> list[float]:
        self.embed_query_calls.append(text)
        return [1.0, 0.0]

    @property
    def call_count(self) -> int:
        return len(self.embed_texts_calls) + len(self.embed_query_calls)


class StubSearch:
    """Search capability returning a fixed response, optionally blocking."""

    def __init__(
        self,
        results: list[SearchResult] | None = None,
        error: Exception | None = None,
        block: bool = False,
    ) -> None:
        self.response = SearchResponse(results=results or [])
        self.error = error
        self.block = block
        self.calls: list[dict] = []
        self.started = asyncio.Event()
        self.cancelled = False

    async def search(
        self,
        query: str,
        language: str | None = None,
        engines: list[str] | None = None,
    ) -> SearchResponse:
        self.calls.append({"query": query, "language": language, "engines": engines})
        self.started.set()
        if self.error is not None:
            raise self.error
        if self.block:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        return self.response


def make_result(title: str, content: str = "", url: str | None = None, **fields) -> SearchResult:
    """Build a search result with a URL derived from the title."""
    return SearchResult(
        title=title,
        url=url or f"https://example.com/{title.lower().replace(' ', '-')}",
        content=content,
        **fields,
    )


@pytest.fixture
def stub_llm_factory():
    """Factory for StubLanguageModel instances."""
    return StubLanguageModel


@pytest.fixture
def stub_embeddings_factory():
    """Factory for StubEmbeddings instances."""
    return StubEmbeddings


@pytest.fixture
def stub_search_factory():
    """Factory for StubSearch instances."""
    return StubSearch


@pytest.fixture
def embedding_failure() -> EmbeddingUnavailableError:
    """Typed embedding failure."""
    return EmbeddingUnavailableError("Embedding provider down", operation="embed_texts")


@pytest.fixture(autouse=True)
def reset_prompt_registry():
    """Drop the prompt registry singleton so each test reads fresh settings."""
    PromptRegistry.reset()
    yield
    PromptRegistry.reset()


@pytest.fixture
def result_factory():
    """Factory for SearchResult instances."""
    return make_result
