"""
Follow-up suggestion generation.

Asks the language model for 4-5 follow-up questions and parses them from
a <suggestions> block, one per line.

Dependencies: langchain_core.output_parsers, focusrag.core.capabilities
System role: Follow-up suggestions for a conversation
"""

import logging
import re

from langchain_core.output_parsers import BaseOutputParser

from focusrag.core.capabilities import LanguageModelCapability
from focusrag.core.focus_modes.prompts import SUGGESTION_PROMPT
from focusrag.models.chat import ChatMessage, format_chat_history

logger = logging.getLogger(__name__)

_LIST_MARKER = re.compile(r"^(\s*(-|\*|\d+\.\s|\d+\)\s|•)\s*)+")


class ListLineOutputParser(BaseOutputParser[list[str]]):
    """Parses the lines between <key> and </key> into a list, dropping list markers."""

    key: str = "questions"

    def parse(self, text: str) -> list[str]:
        start_tag, end_tag = f"<{self.key}>", f"</{self.key}>"
        start = text.find(start_tag)
        end = text.find(end_tag)
        if start == -1 or end == -1 or end < start:
            return []

        block = text[start + len(start_tag):end].strip()
        return [
            _LIST_MARKER.sub("", line).strip()
            for line in block.split("\n")
            if line.strip()
        ]

    @property
    def _type(self) -> str:
        return "list_line"


class SuggestionGenerator:
    """Generates follow-up suggestions at temperature 0."""

    def __init__(self, llm: LanguageModelCapability, temperature: float = 0.0) -> None:
        self._llm = llm
        self._temperature = temperature
        self._parser = ListLineOutputParser(key="suggestions")

    async def generate(self, history: list[ChatMessage]) -> list[str]:
        """
        Generate suggestions for a conversation.

        Args:
            history: Conversation so far, oldest first

        Returns:
            list[str]: Suggestions, empty when the model omits the block

        Raises:
            ModelUnavailableError: Language model failure
        """
        prompt_value = await SUGGESTION_PROMPT.ainvoke({"chat_history": format_chat_history(history)})
        output = await self._llm.complete(prompt_value, temperature=self._temperature)
        suggestions = self._parser.parse(output)
        logger.info(f"{__name__}:generate - Parsed {len(suggestions)} suggestions")
        return suggestions
