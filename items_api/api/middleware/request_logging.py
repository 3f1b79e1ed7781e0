"""
Request Logging Middleware

Logs one line per request and binds request context for every log line
written while the request is being handled.

Context Variables:
==================
    request_id  ← X-Request-ID header, or a fresh uuid4 hex
    method      ← HTTP method
    path        ← URL path

The request id is echoed back in the X-Request-ID response header.

Usage:
======
    from items_api.api.middleware import RequestLoggingMiddleware

    app.add_middleware(RequestLoggingMiddleware)
"""

import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from items_api.shared.core.logging import clear_log_context, get_logger, log_context
from items_api.shared.utils.constants import REQUEST_ID_HEADER

logger = get_logger("items_api.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind request context and log request completion with timing."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        log_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_log_context()
