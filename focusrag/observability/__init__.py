"""
Observability module.

Provides structured logging, correlation ID tracking, and prompt
version management.
"""

from focusrag.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
