"""
Test suite for the focus-mode table.

System role: Verification of per-mode pipeline parameters
"""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.prompts import PromptTemplate

from focusrag.core.exceptions import FocusModeNotFoundError
from focusrag.core.focus_modes import (
    FOCUS_MODES,
    get_focus_mode,
    list_focus_modes,
    register_focus_mode_prompts,
    with_registry_prompts,
)


class TestFocusModeTable:
    """Test suite for focus-mode lookup and parameters."""

    def test_all_modes_are_present(self) -> None:
        assert [mode.name for mode in list_focus_modes()] == [
            "webSearch",
            "academicSearch",
            "redditSearch",
            "youtubeSearch",
            "wolframAlphaSearch",
            "writingAssistant",
        ]

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(FocusModeNotFoundError) as exc_info:
            get_focus_mode("imageSearch")

        assert exc_info.value.details["focus_mode"] == "imageSearch"

    @pytest.mark.parametrize(
        ("name", "engines", "threshold", "limit", "rerank"),
        [
            ("webSearch", (), 0.5, 15, True),
            ("academicSearch", ("arxiv", "google scholar", "internetarchivescholar", "pubmed"), None, 15, True),
            ("redditSearch", ("reddit",), 0.3, 15, True),
            ("youtubeSearch", ("youtube",), 0.3, 15, True),
            ("wolframAlphaSearch", ("wolframalpha",), None, None, False),
        ],
    )
    def test_retrieval_parameters(self, name, engines, threshold, limit, rerank) -> None:
        mode = get_focus_mode(name)

        assert mode.engines == engines
        assert mode.similarity_threshold == threshold
        assert mode.result_limit == limit
        assert mode.rerank is rerank
        assert mode.retrieval is True
        assert mode.sentinel == "not_needed"

    def test_writing_assistant_has_no_retrieval(self) -> None:
        mode = get_focus_mode("writingAssistant")

        assert mode.retrieval is False
        assert mode.rewrite_prompt is None

    def test_rewrite_prompts_take_history_and_query(self) -> None:
        for mode in list_focus_modes():
            if mode.rewrite_prompt is not None:
                assert set(mode.rewrite_prompt.input_variables) == {"chat_history", "query"}

    def test_answer_prompts_carry_source_label(self) -> None:
        for name in ("webSearch", "redditSearch", "youtubeSearch", "wolframAlphaSearch"):
            mode = FOCUS_MODES[name]
            system_template = mode.answer_prompt.messages[0].prompt.template
            assert mode.source_label in system_template
            assert "{context}" in system_template


class TestRegistryIntegration:
    """Test suite for prompt registry hooks."""

    def test_with_registry_prompts_returns_mode_when_disabled(self) -> None:
        mode = get_focus_mode("webSearch")

        assert with_registry_prompts(mode) is mode

    def test_with_registry_prompts_replaces_templates(self) -> None:
        # Arrange
        mode = get_focus_mode("webSearch")
        replacement = PromptTemplate.from_template("registry {chat_history} {query}")
        registry = MagicMock(is_enabled=True)
        registry.resolve.side_effect = lambda name, fallback, label=None: (
            replacement if name == "webSearch-rewrite" else fallback
        )

        # Act
        with patch("focusrag.core.focus_modes.table.PromptRegistry", return_value=registry):
            resolved = with_registry_prompts(mode, label="production")

        # Assert
        assert resolved.rewrite_prompt is replacement
        assert resolved.answer_prompt is mode.answer_prompt
        assert get_focus_mode("webSearch").rewrite_prompt is not replacement

    def test_register_skips_when_disabled(self) -> None:
        assert register_focus_mode_prompts(model_id="gemini-2.5-flash") == 0

    def test_register_pushes_every_prompt(self) -> None:
        registry = MagicMock(is_enabled=True)

        with patch("focusrag.core.focus_modes.table.PromptRegistry", return_value=registry):
            count = register_focus_mode_prompts(model_id="gemini-2.5-flash", temperature=0.7, labels=["dev"])

        # Five retrieval modes register two prompts, the writing assistant one.
        assert count == 11
        names = [call.args[0] for call in registry.register_prompt.call_args_list]
        assert "writingAssistant-answer" in names
        assert "webSearch-rewrite" in names
