"""
wilayah.observability.middleware

HTTP middleware for request-scoped logging context and access logs.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from wilayah.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Ensures every request has a request id (echoed as `x-request-id`)
    - Binds request metadata into structlog contextvars
    - Emits one `request` event per response with status and duration
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()
        try:
            try:
                response: Response = await call_next(request)
            except Exception:
                log.error("request", status=500, duration_ms=_elapsed_ms(started), exc_info=True)
                raise
            log.info("request", status=response.status_code, duration_ms=_elapsed_ms(started))
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
