"""
Search pipeline: query rewriting, answer generation and orchestration.
"""

from focusrag.core.pipeline.answer_generator import AnswerGenerator, format_context
from focusrag.core.pipeline.event_stream import EventStream
from focusrag.core.pipeline.orchestrator import (
    GENERIC_ERROR_MESSAGE,
    PipelineStage,
    SearchPipeline,
)
from focusrag.core.pipeline.query_rewriter import QueryRewriter, RewriteResult

__all__ = [
    "AnswerGenerator",
    "format_context",
    "EventStream",
    "GENERIC_ERROR_MESSAGE",
    "PipelineStage",
    "SearchPipeline",
    "QueryRewriter",
    "RewriteResult",
]
