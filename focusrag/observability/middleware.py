"""
FastAPI middleware for observability.

Binds a correlation scope per request and logs each request with its
status and duration.

Dependencies: fastapi, starlette, focusrag.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from focusrag.observability.correlation import correlation_scope
from focusrag.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Probed by load balancers; logged at DEBUG only
QUIET_PATH_SUFFIXES = ("/health",)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with status code and processing time."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{method} {path} - Exception",
                e,
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        level = logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO
        log_with_context(
            logger,
            level,
            f"{method} {path} - {response.status_code}",
            status_code=response.status_code,
            process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Run each request inside a correlation scope and echo its ID."""

    async def dispatch(self, request: Request, call_next):
        """
        Bind the caller's X-Correlation-ID, or a new one, for the request.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
