"""
Focus-mode table.

One FocusModeConfig per supported mode, plus lookup helpers and prompt
registry integration.

Dependencies: focusrag.core.focus_modes, focusrag.observability.prompt_registry
System role: Focus-mode registry
"""

import logging

from focusrag.core.exceptions import FocusModeNotFoundError
from focusrag.core.focus_modes import prompts
from focusrag.core.focus_modes.config import FocusModeConfig
from focusrag.observability.prompt_registry import ModelConfig, PromptRegistry

logger = logging.getLogger(__name__)

_FOCUS_MODE_LIST = [
    FocusModeConfig(
        name="webSearch",
        source_label="a search engine",
        rewrite_prompt=prompts.WEB_REWRITE_PROMPT,
        answer_prompt=prompts.answer_prompt(
            "You are set on focus mode 'Web Search', this means you will be searching the whole web.",
            "a search engine",
        ),
        similarity_threshold=0.5,
        result_limit=15,
    ),
    FocusModeConfig(
        name="academicSearch",
        source_label="a search engine",
        rewrite_prompt=prompts.ACADEMIC_REWRITE_PROMPT,
        answer_prompt=prompts.answer_prompt(
            "You are set on focus mode 'Academic', this means you will be searching for academic papers and articles on the web.",
            "a search engine",
        ),
        engines=("arxiv", "google scholar", "internetarchivescholar", "pubmed"),
        result_limit=15,
    ),
    FocusModeConfig(
        name="redditSearch",
        source_label="Reddit",
        rewrite_prompt=prompts.REDDIT_REWRITE_PROMPT,
        answer_prompt=prompts.answer_prompt(
            "You are set on focus mode 'Reddit', this means you will be searching for information, opinions and discussions on the web using Reddit.",
            "Reddit",
        ),
        engines=("reddit",),
        similarity_threshold=0.3,
        result_limit=15,
        content_fallback_to_title=True,
    ),
    FocusModeConfig(
        name="youtubeSearch",
        source_label="YouTube",
        rewrite_prompt=prompts.YOUTUBE_REWRITE_PROMPT,
        answer_prompt=prompts.answer_prompt(
            "You are set on focus mode 'Youtube', this means you will be searching for videos on the web using Youtube and providing information based on the video's transcript.",
            "YouTube",
        ),
        engines=("youtube",),
        similarity_threshold=0.3,
        result_limit=15,
        content_fallback_to_title=True,
    ),
    FocusModeConfig(
        name="wolframAlphaSearch",
        source_label="Wolfram Alpha",
        rewrite_prompt=prompts.WOLFRAM_ALPHA_REWRITE_PROMPT,
        answer_prompt=prompts.answer_prompt(
            "You are set on focus mode 'Wolfram Alpha', this means you will be searching the web for information using Wolfram Alpha. It is a computational knowledge engine that can answer factual queries and perform computations.",
            "Wolfram Alpha",
        ),
        engines=("wolframalpha",),
        rerank=False,
    ),
    FocusModeConfig(
        name="writingAssistant",
        source_label="none",
        answer_prompt=prompts.WRITING_ASSISTANT_PROMPT,
        rerank=False,
        retrieval=False,
    ),
]

FOCUS_MODES: dict[str, FocusModeConfig] = {mode.name: mode for mode in _FOCUS_MODE_LIST}


def list_focus_modes() -> list[FocusModeConfig]:
    """Return all focus modes in declaration order."""
    return list(_FOCUS_MODE_LIST)


def get_focus_mode(name: str) -> FocusModeConfig:
    """
    Look up a focus mode by name.

    Raises:
        FocusModeNotFoundError: If no mode has this name
    """
    try:
        return FOCUS_MODES[name]
    except KeyError:
        raise FocusModeNotFoundError(name, details={"available": sorted(FOCUS_MODES)}) from None


def rewrite_prompt_name(mode: FocusModeConfig) -> str:
    return f"{mode.name}-rewrite"


def answer_prompt_name(mode: FocusModeConfig) -> str:
    return f"{mode.name}-answer"


def with_registry_prompts(mode: FocusModeConfig, label: str | None = None) -> FocusModeConfig:
    """
    Return the mode with prompts resolved through the Langfuse registry.

    Prompts missing from the registry keep their bundled template.
    """
    registry = PromptRegistry()
    if not registry.is_enabled:
        return mode

    update = {"answer_prompt": registry.resolve(answer_prompt_name(mode), mode.answer_prompt, label=label)}
    if mode.rewrite_prompt is not None:
        update["rewrite_prompt"] = registry.resolve(
            rewrite_prompt_name(mode), mode.rewrite_prompt, label=label
        )
    return mode.model_copy(update=update)


def register_focus_mode_prompts(
    model_id: str,
    temperature: float | None = None,
    labels: list[str] | None = None,
) -> int:
    """
    Push every bundled focus-mode prompt to the Langfuse registry.

    Args:
        model_id: Chat model identifier stored with each prompt
        temperature: Sampling temperature stored with each prompt
        labels: Optional labels (e.g., ["production"])

    Returns:
        int: Number of prompts registered (0 when the registry is disabled)
    """
    registry = PromptRegistry()
    if not registry.is_enabled:
        logger.debug(f"{__name__}:register_focus_mode_prompts - Prompt registry disabled, skipping registration")
        return 0

    registered = 0
    for mode in _FOCUS_MODE_LIST:
        config = ModelConfig.for_focus_mode(model_id, mode.name, temperature=temperature)
        registry.register_prompt(answer_prompt_name(mode), mode.answer_prompt, config, labels=labels)
        registered += 1
        if mode.rewrite_prompt is not None:
            registry.register_prompt(rewrite_prompt_name(mode), mode.rewrite_prompt, config, labels=labels)
            registered += 1

    logger.info(f"{__name__}:register_focus_mode_prompts - Registered {registered} prompts")
    return registered
