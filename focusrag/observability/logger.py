"""
Logging configuration.

Installs one stdout handler on the root logger whose records carry the
current correlation ID and any structured context passed through
``extra=`` (focus mode, stage, counts).

Dependencies: logging (stdlib), focusrag.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from focusrag.observability.correlation import get_correlation_id

# Attributes every LogRecord has; anything else came from extra=
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "correlation_id"}

NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "langfuse", "urllib3")


class CorrelationIdFilter(logging.Filter):
    """Attach the current correlation ID to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


class ContextFormatter(logging.Formatter):
    """Formatter that appends structured context as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} | {pairs}"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Safe to call more than once; previously installed handlers are replaced.

    Args:
        level: Root log level name (DEBUG, INFO, ...)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(
        ContextFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
