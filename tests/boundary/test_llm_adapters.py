"""
Test suite for the language model and embedding adapters.

Uses LangChain's fake chat model and deterministic fake embeddings.

System role: Verification of bounded, typed model capabilities
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.prompts import ChatPromptTemplate

from focusrag.boundary.llm import EmbeddingModel, LanguageModel
from focusrag.boundary.llm.chat_model import message_text
from focusrag.core.exceptions import EmbeddingUnavailableError, ModelUnavailableError

PROMPT = ChatPromptTemplate.from_messages([("human", "{query}")])


class TemperatureFakeChatModel(FakeListChatModel):
    """Fake chat model that reports the temperature it was called with."""

    temperature: float = 0.7

    def _call(self, messages, stop=None, run_manager=None, **kwargs) -> str:
        return f"t={self.temperature}"


class TestMessageText:
    """Test suite for message_text."""

    def test_plain_string(self) -> None:
        assert message_text("hello") == "hello"

    def test_content_blocks(self) -> None:
        blocks = [{"type": "text", "text": "a"}, {"type": "image_url", "image_url": "x"}, "b"]
        assert message_text(blocks) == "ab"


class TestLanguageModelComplete:
    """Test suite for LanguageModel.complete."""

    @pytest.mark.asyncio
    async def test_returns_model_text(self) -> None:
        llm = LanguageModel(FakeListChatModel(responses=["capital of France"]))

        result = await llm.complete(PROMPT.invoke({"query": "q"}))

        assert result == "capital of France"

    @pytest.mark.asyncio
    async def test_temperature_applies_to_a_copy(self) -> None:
        # Arrange
        model = TemperatureFakeChatModel(responses=["unused"])
        llm = LanguageModel(model)

        # Act
        result = await llm.complete(PROMPT.invoke({"query": "q"}), temperature=0.0)

        # Assert
        assert result == "t=0.0"
        assert model.temperature == 0.7

    @pytest.mark.asyncio
    async def test_provider_error_is_typed(self) -> None:
        model = MagicMock()
        model.ainvoke = AsyncMock(side_effect=RuntimeError("quota"))
        llm = LanguageModel(model)

        with pytest.raises(ModelUnavailableError) as exc_info:
            await llm.complete(PROMPT.invoke({"query": "q"}))

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_timeout_is_typed(self) -> None:
        async def slow(prompt):
            await asyncio.sleep(1.0)

        model = MagicMock()
        model.ainvoke = slow
        llm = LanguageModel(model, timeout_seconds=0.01)

        with pytest.raises(ModelUnavailableError, match="timed out"):
            await llm.complete(PROMPT.invoke({"query": "q"}))


class TestLanguageModelStream:
    """Test suite for LanguageModel.stream."""

    @pytest.mark.asyncio
    async def test_streams_text_chunks(self) -> None:
        llm = LanguageModel(FakeListChatModel(responses=["Hello"]))

        chunks = [chunk async for chunk in llm.stream(PROMPT.invoke({"query": "q"}))]

        assert "".join(chunks) == "Hello"
        assert all(chunks)

    @pytest.mark.asyncio
    async def test_stalled_stream_is_typed(self) -> None:
        llm = LanguageModel(FakeListChatModel(responses=["abc"], sleep=0.5), timeout_seconds=0.01)

        with pytest.raises(ModelUnavailableError, match="stalled"):
            _ = [chunk async for chunk in llm.stream(PROMPT.invoke({"query": "q"}))]


class TestEmbeddingModel:
    """Test suite for EmbeddingModel."""

    @pytest.mark.asyncio
    async def test_embeds_texts_and_query(self) -> None:
        embeddings = EmbeddingModel(DeterministicFakeEmbedding(size=8))

        vectors = await embeddings.embed_texts(["a", "b"])
        query = await embeddings.embed_query("a")

        assert len(vectors) == 2
        assert len(query) == 8
        assert vectors[0] == query

    @pytest.mark.asyncio
    async def test_provider_error_is_typed(self) -> None:
        provider = MagicMock()
        provider.aembed_documents = AsyncMock(side_effect=ConnectionError("reset"))
        embeddings = EmbeddingModel(provider)

        with pytest.raises(EmbeddingUnavailableError) as exc_info:
            await embeddings.embed_texts(["a"])

        assert exc_info.value.details["operation"] == "embed_texts"

    @pytest.mark.asyncio
    async def test_query_timeout_is_typed(self) -> None:
        async def slow(text):
            await asyncio.sleep(1.0)

        provider = MagicMock()
        provider.aembed_query = slow
        embeddings = EmbeddingModel(provider, timeout_seconds=0.01)

        with pytest.raises(EmbeddingUnavailableError, match="timed out"):
            await embeddings.embed_query("a")
