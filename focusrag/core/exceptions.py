"""
Exception hierarchy for the focus-mode search pipeline.

Provides layered exception structure for capability and pipeline errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class FocusRagException(Exception):
    """Base exception for all focusrag application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(FocusRagException):
    """Raised when vectors handed to the similarity scorer are malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Name of the offending argument
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class CapabilityError(FocusRagException):
    """Base exception for failures of an external capability."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize capability error.

        Args:
            message: Error message
            operation: Operation that failed (search, embed_texts, stream, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class SearchUnavailableError(CapabilityError):
    """Raised when the search backend cannot be reached or answers badly."""

    pass


class EmbeddingUnavailableError(CapabilityError):
    """Raised when the embedding provider fails or times out."""

    pass


class ModelUnavailableError(CapabilityError):
    """Raised when the language model fails or times out."""

    pass


class FocusModeNotFoundError(FocusRagException):
    """Raised when a focus mode name is not in the configuration table."""

    def __init__(self, focus_mode: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize focus mode not found error.

        Args:
            focus_mode: Requested focus mode name
            details: Additional context
        """
        details = details or {}
        details["focus_mode"] = focus_mode
        super().__init__(f"Focus mode not found: {focus_mode}", details)


class PipelineFailureError(FocusRagException):
    """Wraps any failure caught at the pipeline orchestrator boundary."""

    def __init__(
        self,
        stage: str,
        cause: BaseException,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize pipeline failure.

        Args:
            stage: Pipeline state in which the failure happened
            cause: Underlying exception
            details: Additional context
        """
        details = details or {}
        details["stage"] = stage
        details["cause_type"] = type(cause).__name__
        self.stage = stage
        self.cause = cause
        super().__init__(f"Pipeline failed during {stage}: {cause}", details)
