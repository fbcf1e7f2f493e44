"""
Logging utilities for safe structured logging.

Helpers that turn arbitrary pipeline values (queries, document lists,
exceptions) into bounded strings suitable for ``extra=`` context.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert a value to a bounded string for logging.

    Sequences and mappings are summarized by size, long strings are cut.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as record attributes
    """
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with traceback and structured context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc), max_length=500)
    logger.error(message, exc_info=exc, extra=extra)
