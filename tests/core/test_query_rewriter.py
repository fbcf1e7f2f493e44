"""
Test suite for QueryRewriter.

System role: Verification of history-aware query rewriting and sentinel handling
"""

import pytest
from langchain_core.prompts import PromptTemplate

from focusrag.core.exceptions import ModelUnavailableError
from focusrag.core.focus_modes.prompts import NOT_NEEDED, WEB_REWRITE_PROMPT
from focusrag.core.pipeline.query_rewriter import QueryRewriter, RewriteResult, matches_sentinel
from focusrag.models.chat import ChatMessage, ChatRole


class TestMatchesSentinel:
    """Test suite for sentinel normalization."""

    @pytest.mark.parametrize(
        "output",
        ["not_needed", " Not_Needed. ", "`not_needed`", '"NOT_NEEDED"', "not_needed.\n", "", "   "],
    )
    def test_sentinel_variants_match(self, output: str) -> None:
        assert matches_sentinel(output, NOT_NEEDED)

    @pytest.mark.parametrize("output", ["capital of France", "not needed at all", "needed"])
    def test_real_queries_do_not_match(self, output: str) -> None:
        assert not matches_sentinel(output, NOT_NEEDED)


class TestQueryRewriter:
    """Test suite for QueryRewriter.rewrite."""

    @pytest.mark.asyncio
    async def test_returns_trimmed_rewritten_query(self, stub_llm_factory) -> None:
        # Arrange
        llm = stub_llm_factory(completions=["  capital of France \n"])
        rewriter = QueryRewriter(llm, WEB_REWRITE_PROMPT, sentinel=NOT_NEEDED)

        # Act
        result = await rewriter.rewrite("What is the capital of France?", [])

        # Assert
        assert result == RewriteResult.rewritten("capital of France")
        assert not result.is_not_needed

    @pytest.mark.asyncio
    async def test_sentinel_output_means_not_needed(self, stub_llm_factory) -> None:
        llm = stub_llm_factory(completions=[" Not_Needed. "])
        rewriter = QueryRewriter(llm, WEB_REWRITE_PROMPT, sentinel=NOT_NEEDED)

        result = await rewriter.rewrite("hi", [])

        assert result.is_not_needed
        assert result.query is None

    @pytest.mark.asyncio
    async def test_prompt_contains_serialized_history_and_query(self, stub_llm_factory) -> None:
        llm = stub_llm_factory(completions=["docker networking"])
        rewriter = QueryRewriter(llm, WEB_REWRITE_PROMPT, sentinel=NOT_NEEDED)
        history = [
            ChatMessage(role=ChatRole.USER, content="What is Docker?"),
            ChatMessage(role=ChatRole.ASSISTANT, content="A container runtime."),
        ]

        await rewriter.rewrite("How does its networking work?", history)

        prompt_text = llm.complete_calls[0].to_string()
        assert "User: What is Docker?\nAI: A container runtime." in prompt_text
        assert "Follow up question: How does its networking work?" in prompt_text

    @pytest.mark.asyncio
    async def test_without_sentinel_blank_output_falls_back_to_query(self, stub_llm_factory) -> None:
        llm = stub_llm_factory(completions=["  "])
        prompt = PromptTemplate.from_template("{chat_history}\n{query}")
        rewriter = QueryRewriter(llm, prompt)

        result = await rewriter.rewrite("cats", [])

        assert result.query == "cats"

    @pytest.mark.asyncio
    async def test_model_failure_propagates(self, stub_llm_factory) -> None:
        llm = stub_llm_factory(complete_error=ModelUnavailableError("down", operation="complete"))
        rewriter = QueryRewriter(llm, WEB_REWRITE_PROMPT, sentinel=NOT_NEEDED)

        with pytest.raises(ModelUnavailableError):
            await rewriter.rewrite("anything", [])
