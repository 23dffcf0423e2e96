"""Custom middleware for the API."""

import time
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)

# Probed constantly by the host; logged at debug level only
QUIET_PATHS = frozenset({"/v1/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and tag every log line it produces with its id."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-ID", str(time.time_ns()))
        log = logger.debug if request.url.path in QUIET_PATHS else logger.info

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            log("request.started", method=request.method, path=request.url.path)
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000

            log(
                "request.completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        response.headers["X-Request-ID"] = request_id
        return response
