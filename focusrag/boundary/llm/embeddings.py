"""
Embedding model adapter.

Wraps a LangChain Embeddings implementation with bounded waits and
EmbeddingUnavailableError on any provider failure.

Dependencies: langchain_core.embeddings
System role: Embedding boundary
"""

import asyncio
import logging

from langchain_core.embeddings import Embeddings

from focusrag.core.exceptions import EmbeddingUnavailableError

logger = logging.getLogger(__name__)


class EmbeddingModel:
    """Bounded, typed wrapper around LangChain embeddings."""

    def __init__(self, embeddings: Embeddings, timeout_seconds: float = 30.0) -> None:
        self._embeddings = embeddings
        self._timeout = timeout_seconds

    async def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts in one provider call.

        Args:
            texts: Texts to embed

        Returns:
            One vector per text, in input order

        Raises:
            EmbeddingUnavailableError: Provider failure or timeout
        """
        logger.debug(f"{__name__}:embed_texts - Embedding {len(texts)} texts")
        try:
            return await asyncio.wait_for(
                self._embeddings.aembed_documents(texts),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingUnavailableError(
                f"Embedding timed out after {self._timeout}s",
                operation="embed_texts",
            ) from e
        except Exception as e:
            raise EmbeddingUnavailableError(
                f"Embedding call failed: {type(e).__name__}",
                operation="embed_texts",
            ) from e

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a single query.

        Raises:
            EmbeddingUnavailableError: Provider failure or timeout
        """
        try:
            return await asyncio.wait_for(
                self._embeddings.aembed_query(text),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingUnavailableError(
                f"Query embedding timed out after {self._timeout}s",
                operation="embed_query",
            ) from e
        except Exception as e:
            raise EmbeddingUnavailableError(
                f"Query embedding failed: {type(e).__name__}",
                operation="embed_query",
            ) from e
