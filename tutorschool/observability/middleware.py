"""
HTTP middleware for the tutorschool API.

CorrelationMiddleware binds the X-Correlation-ID header (or a fresh id) to
the request so every log line of a booking or schedule check carries it.
RequestLoggingMiddleware logs one line when a request starts and one when
it ends; server errors are logged at WARNING so they stand out from the
409 conflicts and 404s that are normal traffic here.

Dependencies: fastapi, tutorschool.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from tutorschool.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each API request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info(
            "%s %s",
            method,
            path,
            extra={
                "method": method,
                "path": path,
                "query_string": request.url.query or None,
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                "%s %s failed",
                method,
                path,
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": _elapsed_ms(started),
                    "error_type": type(e).__name__,
                },
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s - %s",
            method,
            path,
            response.status_code,
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(started),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the request and echo it in the response."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
