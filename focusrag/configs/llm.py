"""
Language model and embedding configuration settings.

Selects the chat model used for query rewriting and answer generation,
the embedding model used for reranking, and the bounded wait applied
to every call against them.

Dependencies: pydantic, pydantic_settings
System role: Model capability configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from focusrag.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Chat and embedding model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model identifier used for rewriting and answering",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model identifier used for reranking",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Default sampling temperature for the chat model",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Maximum wait for a single model call or streamed chunk",
    )
    embedding_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Maximum wait for a single embedding call",
    )
    google_api_key: str | None = Field(
        default=None,
        description="Google Generative AI API key (falls back to GOOGLE_API_KEY)",
    )
