"""Middleware for observability: request/response logging."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from tunebridge.infrastructure.observability.logging import (
    get_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


# Hey future me, this middleware logs EVERY HTTP request/response and pins the correlation ID
# for the whole request. A client-supplied X-Correlation-ID is reused so callers can trace
# their own request through our logs. Probe endpoints (/health/*) only log at DEBUG -
# Kubernetes hits them every few seconds.
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    def __init__(self, app: ASGIApp, log_request_body: bool = False) -> None:
        """Initialize middleware.

        Args:
            app: ASGI application
            log_request_body: Whether to log request body (can be verbose)
        """
        super().__init__(app)
        self.log_request_body = log_request_body

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and log details."""
        set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        log_level = logging.DEBUG if path.startswith("/health") else logging.INFO

        extra = {
            "method": method,
            "path": path,
            "query_params": str(request.query_params),
            "client_ip": client_ip,
        }
        if self.log_request_body:
            extra["body"] = (await request.body()).decode("utf-8", errors="replace")
        logger.log(log_level, "→ %s %s", method, path, extra=extra)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.exception(
                "Request failed: %s %s",
                method,
                path,
                extra={
                    "method": method,
                    "path": path,
                    "duration_seconds": duration,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        status_mark = "✓" if response.status_code < 400 else "✗"
        logger.log(
            log_level,
            "%s %s %s → %d (%dms)",
            status_mark,
            method,
            path,
            response.status_code,
            duration_ms,
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
