"""
Cited answer generation.

Serializes the reranked documents into a numbered context block and
streams the model's answer. Citation [n] refers to the n-th document.

Dependencies: langchain_core.prompts, focusrag.core.capabilities
System role: Final pipeline stage
"""

import logging
from collections.abc import AsyncIterator
from datetime import datetime, timezone

from langchain_core.documents import Document
from langchain_core.prompts import BasePromptTemplate

from focusrag.core.capabilities import LanguageModelCapability
from focusrag.models.chat import ChatMessage, to_langchain_history

logger = logging.getLogger(__name__)


def format_context(documents: list[Document]) -> str:
    """Number documents from 1 in order, one per line."""
    return "\n".join(
        f"{index}. {document.page_content}"
        for index, document in enumerate(documents, start=1)
    )


class AnswerGenerator:
    """Streams an answer grounded in numbered context documents."""

    def __init__(
        self,
        llm: LanguageModelCapability,
        prompt: BasePromptTemplate,
        temperature: float | None = None,
    ) -> None:
        self._llm = llm
        self._prompt = prompt
        self._temperature = temperature

    async def generate(
        self,
        query: str,
        history: list[ChatMessage],
        documents: list[Document],
    ) -> AsyncIterator[str]:
        """
        Stream the answer.

        Args:
            query: Raw user query
            history: Prior conversation, oldest first
            documents: Context documents in citation order

        Yields:
            str: Answer chunks as the model produces them

        Raises:
            ModelUnavailableError: Language model failure
        """
        prompt_value = await self._prompt.ainvoke({
            "context": format_context(documents),
            "date": datetime.now(timezone.utc).isoformat(),
            "chat_history": to_langchain_history(history),
            "query": query,
        })
        logger.info(f"{__name__}:generate - Generating with {len(documents)} context documents")

        async for chunk in self._llm.stream(prompt_value, temperature=self._temperature):
            if chunk:
                yield chunk
