"""
Focus-mode configuration record.

Every focus mode is one immutable row driving the same pipeline: which
prompts to use, which engines to query, and how to rerank.

Dependencies: pydantic, langchain_core.prompts
System role: Per-mode pipeline parameters
"""

from langchain_core.prompts import ChatPromptTemplate, PromptTemplate
from pydantic import BaseModel, ConfigDict, Field

from focusrag.core.focus_modes.prompts import NOT_NEEDED


class FocusModeConfig(BaseModel):
    """
    Pipeline parameters for one focus mode.

    Attributes:
        name: Public mode name, e.g. "webSearch"
        source_label: Who produced the context, used in prompts and listings
        rewrite_prompt: Query rewrite template, None when retrieval is off
        answer_prompt: Answer template (system, history, query)
        sentinel: Rewrite output meaning "no retrieval needed"
        engines: Search engines to query, empty for the backend default
        language: Language filter, None to use the configured default
        similarity_threshold: Keep documents scoring strictly above this
        result_limit: Maximum documents passed on as context
        rerank: Whether the embedding reranker runs
        retrieval: Whether the mode searches at all
        content_fallback_to_title: Use the title when a result has no snippet
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    source_label: str = "a search engine"
    rewrite_prompt: PromptTemplate | None = None
    answer_prompt: ChatPromptTemplate
    sentinel: str = NOT_NEEDED
    engines: tuple[str, ...] = Field(default_factory=tuple)
    language: str | None = None
    similarity_threshold: float | None = None
    result_limit: int | None = None
    rerank: bool = True
    retrieval: bool = True
    content_fallback_to_title: bool = False
