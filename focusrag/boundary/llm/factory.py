"""
Default capability construction.

Builds the Google Generative AI chat and embedding models from settings
and wraps them in the pipeline adapters.

Dependencies: langchain_google_genai, python-dotenv, focusrag.configs
System role: Model capability factory
"""

import logging

from dotenv import load_dotenv
from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from focusrag.boundary.llm.chat_model import LanguageModel
from focusrag.boundary.llm.embeddings import EmbeddingModel
from focusrag.configs.llm import LLMSettings

logger = logging.getLogger(__name__)
load_dotenv()


def _credentials(settings: LLMSettings) -> dict:
    """Explicit API key when configured, otherwise GOOGLE_API_KEY is used."""
    if settings.google_api_key:
        return {"google_api_key": settings.google_api_key}
    return {}


def create_language_model(settings: LLMSettings) -> LanguageModel:
    """
    Create the chat model capability.

    Args:
        settings: Model configuration

    Returns:
        LanguageModel: Adapter around ChatGoogleGenerativeAI
    """
    model = ChatGoogleGenerativeAI(
        model=settings.chat_model,
        temperature=settings.temperature,
        **_credentials(settings),
    )
    logger.info(f"{__name__}:create_language_model - Initialized model={settings.chat_model}")
    return LanguageModel(model, timeout_seconds=settings.timeout_seconds)


def create_embedding_model(settings: LLMSettings) -> EmbeddingModel:
    """
    Create the embedding capability.

    Args:
        settings: Model configuration

    Returns:
        EmbeddingModel: Adapter around GoogleGenerativeAIEmbeddings
    """
    embeddings = GoogleGenerativeAIEmbeddings(
        model=settings.embedding_model,
        **_credentials(settings),
    )
    logger.info(f"{__name__}:create_embedding_model - Initialized model={settings.embedding_model}")
    return EmbeddingModel(embeddings, timeout_seconds=settings.embedding_timeout_seconds)
