"""
Test suite for suggestion generation.

System role: Verification of follow-up suggestion parsing
"""

import pytest

from focusrag.core.suggestions import ListLineOutputParser, SuggestionGenerator
from focusrag.models.chat import ChatMessage, ChatRole


class TestListLineOutputParser:
    """Test suite for ListLineOutputParser."""

    def test_extracts_lines_between_tags(self) -> None:
        parser = ListLineOutputParser(key="suggestions")
        text = "Sure!\n<suggestions>\nFirst idea\n\nSecond idea\n</suggestions>\nBye"

        assert parser.parse(text) == ["First idea", "Second idea"]

    def test_strips_list_markers(self) -> None:
        parser = ListLineOutputParser(key="suggestions")
        text = "<suggestions>\n- dash\n* star\n1. numbered\n2) paren\n• bullet\n</suggestions>"

        assert parser.parse(text) == ["dash", "star", "numbered", "paren", "bullet"]

    def test_missing_tags_give_empty_list(self) -> None:
        parser = ListLineOutputParser(key="suggestions")

        assert parser.parse("no tags here") == []
        assert parser.parse("<suggestions>\nunterminated") == []


class TestSuggestionGenerator:
    """Test suite for SuggestionGenerator.generate."""

    @pytest.mark.asyncio
    async def test_generates_at_temperature_zero(self, stub_llm_factory) -> None:
        # Arrange
        llm = stub_llm_factory(completions=[
            "<suggestions>\nWhat are SpaceX's recent projects?\nWho is the CEO of SpaceX?\n</suggestions>"
        ])
        generator = SuggestionGenerator(llm)
        history = [
            ChatMessage(role=ChatRole.USER, content="Tell me about SpaceX"),
            ChatMessage(role=ChatRole.ASSISTANT, content="SpaceX builds rockets."),
        ]

        # Act
        suggestions = await generator.generate(history)

        # Assert
        assert suggestions == ["What are SpaceX's recent projects?", "Who is the CEO of SpaceX?"]
        assert llm.temperatures == [0.0]
        assert "AI: SpaceX builds rockets." in llm.complete_calls[0].to_string()
