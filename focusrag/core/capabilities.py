"""
External capability interfaces.

Structural types for the three capabilities a search pipeline depends on.
Boundary adapters implement them; tests substitute stubs.

Dependencies: langchain_core.prompt_values, focusrag.models.document
System role: Seams between core logic and external systems
"""

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from langchain_core.prompt_values import PromptValue

from focusrag.models.document import SearchResponse


@runtime_checkable
class SearchCapability(Protocol):
    """Metasearch backend. Raises SearchUnavailableError on failure."""

    async def search(
        self,
        query: str,
        language: str | None = None,
        engines: list[str] | None = None,
    ) -> SearchResponse: ...


@runtime_checkable
class EmbeddingCapability(Protocol):
    """Text embedding provider. Raises EmbeddingUnavailableError on failure."""

    async def embed_texts(self, texts: list[str]) -> list[list[float]]: ...

    async def embed_query(self, text: str) -> list[float]: ...


@runtime_checkable
class LanguageModelCapability(Protocol):
    """Chat model. Raises ModelUnavailableError on failure."""

    async def complete(self, prompt: PromptValue, temperature: float | None = None) -> str: ...

    def stream(self, prompt: PromptValue, temperature: float | None = None) -> AsyncIterator[str]: ...
