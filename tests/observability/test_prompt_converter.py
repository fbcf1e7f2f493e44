"""Tests for LangChain to Langfuse prompt conversion."""

import pytest
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder, PromptTemplate

from focusrag.core.focus_modes.prompts import WEB_REWRITE_PROMPT, answer_prompt
from focusrag.observability.prompt_registry.converter import (
    convert_chat_template,
    convert_text_template,
    to_langfuse_variables,
)


class TestVariableConversion:
    """Tests for {var} to {{var}} rewriting."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Question: {query}", "Question: {{query}}"),
            ("{chat_history}\n{query}", "{{chat_history}}\n{{query}}"),
            ("Already {{doubled}}", "Already {{doubled}}"),
            ("Empty {} braces", "Empty {} braces"),
            ("No variables", "No variables"),
        ],
    )
    def test_conversion(self, text: str, expected: str) -> None:
        assert to_langfuse_variables(text) == expected


class TestChatTemplateConversion:
    """Tests for ChatPromptTemplate conversion."""

    def test_roles_are_mapped(self) -> None:
        template = ChatPromptTemplate.from_messages([
            ("system", "You answer using {context}"),
            ("human", "{query}"),
            ("ai", "Noted."),
        ])

        result = convert_chat_template(template)

        assert result == [
            {"role": "system", "content": "You answer using {{context}}"},
            {"role": "user", "content": "{{query}}"},
            {"role": "assistant", "content": "Noted."},
        ]

    def test_history_placeholder_is_kept(self) -> None:
        template = ChatPromptTemplate.from_messages([
            ("system", "System"),
            MessagesPlaceholder("chat_history"),
            ("human", "{query}"),
        ])

        result = convert_chat_template(template)

        assert result[1] == {"role": "placeholder", "content": "chat_history"}

    def test_answer_prompt_converts(self) -> None:
        result = convert_chat_template(answer_prompt("You search the web.", "the web"))

        assert [message["role"] for message in result] == ["system", "placeholder", "user"]
        assert "{{context}}" in result[0]["content"]
        assert "{{date}}" in result[0]["content"]


class TestTextTemplateConversion:
    """Tests for PromptTemplate conversion."""

    def test_simple_text_template(self) -> None:
        template = PromptTemplate.from_template("Rephrase {query} given {chat_history}")

        assert convert_text_template(template) == "Rephrase {{query}} given {{chat_history}}"

    def test_rewrite_prompt_converts(self) -> None:
        result = convert_text_template(WEB_REWRITE_PROMPT)

        assert "{{query}}" in result
        assert "{{chat_history}}" in result
