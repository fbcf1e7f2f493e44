"""
Embedding-based document reranker.

Orders candidate documents by cosine similarity between the query
embedding and each document embedding, optionally keeping only documents
above a threshold, then truncates.

Dependencies: focusrag.core.capabilities, focusrag.core.retrieval.similarity
System role: Relevance ordering of search results
"""

import asyncio
import logging
import time
from dataclasses import dataclass

from langchain_core.documents import Document

from focusrag.core.capabilities import EmbeddingCapability
from focusrag.core.exceptions import EmbeddingUnavailableError
from focusrag.core.retrieval.similarity import cosine_similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredDocument:
    """Document paired with its similarity to the query and input position."""

    document: Document
    similarity: float
    index: int


class DocumentReranker:
    """Reranks documents against a query with one batched embedding call."""

    def __init__(self, embeddings: EmbeddingCapability) -> None:
        self._embeddings = embeddings

    async def score(self, query: str, documents: list[Document]) -> list[ScoredDocument]:
        """
        Score documents against the query, best first.

        Documents with empty content are dropped before embedding. The sort
        is stable, so equal scores keep input order.

        Args:
            query: Query text
            documents: Candidate documents (not mutated)

        Returns:
            list[ScoredDocument]: Scored documents in descending similarity

        Raises:
            EmbeddingUnavailableError: Provider failure or vector count mismatch
        """
        candidates = [
            (index, doc) for index, doc in enumerate(documents) if doc.page_content
        ]
        if not candidates:
            return []

        doc_vectors, query_vector = await asyncio.gather(
            self._embeddings.embed_texts([doc.page_content for _, doc in candidates]),
            self._embeddings.embed_query(query),
        )
        if len(doc_vectors) != len(candidates):
            raise EmbeddingUnavailableError(
                f"Expected {len(candidates)} embeddings, got {len(doc_vectors)}",
                operation="embed_texts",
            )

        scored = [
            ScoredDocument(
                document=doc,
                similarity=cosine_similarity(query_vector, vector),
                index=index,
            )
            for (index, doc), vector in zip(candidates, doc_vectors)
        ]
        return sorted(scored, key=lambda item: item.similarity, reverse=True)

    async def rerank(
        self,
        query: str,
        documents: list[Document],
        threshold: float | None = None,
        limit: int | None = None,
    ) -> list[Document]:
        """
        Rerank documents by similarity to the query.

        Args:
            query: Query text
            documents: Candidate documents (not mutated)
            threshold: Keep only documents scoring strictly above this value
            limit: Maximum number of documents returned, applied last

        Returns:
            list[Document]: Reranked documents
        """
        if not documents:
            return []

        start = time.perf_counter()
        scored = await self.score(query, documents)
        if threshold is not None:
            scored = [item for item in scored if item.similarity > threshold]
        if limit is not None:
            scored = scored[:limit]

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{__name__}:rerank - Kept {len(scored)}/{len(documents)} documents "
            f"threshold={threshold}, limit={limit}, elapsed_ms={elapsed_ms:.0f}"
        )
        return [item.document for item in scored]
