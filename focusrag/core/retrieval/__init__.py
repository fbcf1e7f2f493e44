"""
Retrieval components: similarity scoring and embedding reranking.
"""

from focusrag.core.retrieval.reranker import DocumentReranker, ScoredDocument
from focusrag.core.retrieval.similarity import cosine_similarity

__all__ = ["DocumentReranker", "ScoredDocument", "cosine_similarity"]
