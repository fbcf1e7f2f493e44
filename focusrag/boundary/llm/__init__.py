"""
Model capability adapters.

Wraps LangChain chat models and embeddings with bounded waits and
typed failures.
"""

from focusrag.boundary.llm.chat_model import LanguageModel
from focusrag.boundary.llm.embeddings import EmbeddingModel
from focusrag.boundary.llm.factory import create_embedding_model, create_language_model

__all__ = [
    "LanguageModel",
    "EmbeddingModel",
    "create_language_model",
    "create_embedding_model",
]
