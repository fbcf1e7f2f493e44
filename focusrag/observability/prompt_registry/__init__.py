"""
Langfuse prompt registry module.

Versions focus-mode prompts from LangChain templates with model
configuration tracking, falling back to the bundled templates.

Dependencies: langfuse, langchain_core, pydantic
System role: Prompt version management and LangChain integration
"""

from focusrag.observability.prompt_registry.models import ModelConfig
from focusrag.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
