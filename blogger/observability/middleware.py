"""
FastAPI middleware for observability.

Correlation ID and request logging middleware. Both run outside the
session middleware, so they never see the decoded session.

Dependencies: fastapi, starlette, blogger.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from blogger.observability.correlation import clear_correlation_id, set_correlation_id
from blogger.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

LOGGED_PREFIXES = ("/api/",)
LOGGED_PATHS = frozenset({"/", "/profile", "/users", "/login", "/logout"})


def _is_app_route(path: str) -> bool:
    return path in LOGGED_PATHS or path.startswith(LOGGED_PREFIXES)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one record per request with its outcome and duration.

    API and page requests log at INFO; static asset hits (anything outside
    ``LOGGED_PREFIXES`` and ``LOGGED_PATHS``) drop to DEBUG. Responses
    with a 5xx status log at ERROR.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        level = logging.INFO if _is_app_route(path) else logging.DEBUG

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{method} {path} failed",
                e,
                method=method,
                path=path,
                duration_ms=_elapsed_ms(started),
            )
            raise

        if response.status_code >= 500:
            level = logging.ERROR
        log_with_context(
            logger,
            level,
            f"{method} {path} -> {response.status_code}",
            method=method,
            path=path,
            query=request.url.query or None,
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
            client_host=request.client.host if request.client else None,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
