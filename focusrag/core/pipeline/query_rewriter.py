"""
History-aware query rewriting.

Asks the language model to turn the latest user message into a standalone
search query. A sentinel answer means the message needs no retrieval.

Dependencies: langchain_core.prompts, focusrag.core.capabilities
System role: First pipeline stage
"""

import logging
from dataclasses import dataclass

from langchain_core.prompts import BasePromptTemplate

from focusrag.core.capabilities import LanguageModelCapability
from focusrag.models.chat import ChatMessage, format_chat_history

logger = logging.getLogger(__name__)

_QUOTE_CHARS = "\"'`"


@dataclass(frozen=True)
class RewriteResult:
    """Outcome of a rewrite: a standalone query, or None when not needed."""

    query: str | None = None

    @property
    def is_not_needed(self) -> bool:
        return self.query is None

    @classmethod
    def not_needed(cls) -> "RewriteResult":
        return cls(query=None)

    @classmethod
    def rewritten(cls, text: str) -> "RewriteResult":
        return cls(query=text)


def matches_sentinel(output: str, sentinel: str) -> bool:
    """
    Check whether model output means "no retrieval needed".

    Whitespace, surrounding quotes or backticks and a trailing period are
    ignored and the comparison is case-insensitive. Empty output also
    counts as the sentinel.
    """
    text = output.strip().strip(_QUOTE_CHARS).strip()
    text = text.rstrip(".").strip().strip(_QUOTE_CHARS).strip()
    return not text or text.casefold() == sentinel.casefold()


class QueryRewriter:
    """Rewrites follow-up questions into standalone search queries."""

    def __init__(
        self,
        llm: LanguageModelCapability,
        prompt: BasePromptTemplate,
        sentinel: str | None = None,
    ) -> None:
        """
        Initialize the rewriter.

        Args:
            llm: Language model capability
            prompt: Template expecting chat_history and query
            sentinel: Output meaning "no retrieval needed"; None disables the check
        """
        self._llm = llm
        self._prompt = prompt
        self._sentinel = sentinel

    async def rewrite(self, query: str, history: list[ChatMessage]) -> RewriteResult:
        """
        Rewrite a query with one non-streamed model call.

        Args:
            query: Raw user query
            history: Prior conversation, oldest first

        Returns:
            RewriteResult: not_needed, or the trimmed rewritten query. Without
            a sentinel, blank output falls back to the raw query.

        Raises:
            ModelUnavailableError: Language model failure
        """
        prompt_value = await self._prompt.ainvoke({
            "chat_history": format_chat_history(history),
            "query": query,
        })
        output = await self._llm.complete(prompt_value)

        if self._sentinel is not None and matches_sentinel(output, self._sentinel):
            logger.info(f"{__name__}:rewrite - Retrieval not needed")
            return RewriteResult.not_needed()

        rewritten = output.strip() or query
        logger.info(f"{__name__}:rewrite - Rewritten query_len={len(rewritten)}")
        return RewriteResult.rewritten(rewritten)
