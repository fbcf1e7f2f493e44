"""
Configuration for the focus-mode search service.

Settings groups for the chat and embedding models, the SearxNG backend and
Langfuse, each mapped from environment variables with validation.
"""

from focusrag.configs.llm import LLMSettings
from focusrag.configs.observability import ObservabilitySettings
from focusrag.configs.search import SearchSettings
from focusrag.configs.settings import Settings, get_settings

__all__ = ["LLMSettings", "ObservabilitySettings", "SearchSettings", "Settings", "get_settings"]
