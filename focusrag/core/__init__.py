"""
Core business logic module.

Contains the focus-mode table, retrieval and pipeline components, and the
exception hierarchy. All business rules and domain-specific logic reside here.
"""

from focusrag.core.exceptions import (
    CapabilityError,
    EmbeddingUnavailableError,
    FocusModeNotFoundError,
    FocusRagException,
    InvalidInputError,
    ModelUnavailableError,
    PipelineFailureError,
    SearchUnavailableError,
)

__all__ = [
    "FocusRagException",
    "InvalidInputError",
    "CapabilityError",
    "SearchUnavailableError",
    "EmbeddingUnavailableError",
    "ModelUnavailableError",
    "FocusModeNotFoundError",
    "PipelineFailureError",
]
