"""
Focus modes: one configuration row per mode driving the shared pipeline.
"""

from focusrag.core.focus_modes.config import FocusModeConfig
from focusrag.core.focus_modes.prompts import NOT_NEEDED
from focusrag.core.focus_modes.table import (
    FOCUS_MODES,
    get_focus_mode,
    list_focus_modes,
    register_focus_mode_prompts,
    with_registry_prompts,
)

__all__ = [
    "FocusModeConfig",
    "NOT_NEEDED",
    "FOCUS_MODES",
    "get_focus_mode",
    "list_focus_modes",
    "register_focus_mode_prompts",
    "with_registry_prompts",
]
