"""Request timing middleware.

Records request duration and logs slow requests.
Adds X-Request-Duration-Ms and X-Request-ID headers to all responses.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Excluded from request logs (high frequency, low value)
_SKIP_LOG = frozenset({"/health"})


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Times every request and logs it by outcome.

    Args:
        slow_threshold_ms: Requests slower than this are logged at WARNING.
    """

    def __init__(self, app, slow_threshold_ms: float = 1000.0) -> None:
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex[:12])

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{duration_ms:.1f}"
        response.headers["X-Request-ID"] = request_id

        path = request.url.path
        if path not in _SKIP_LOG:
            if duration_ms > self.slow_threshold_ms:
                logger.warning("Slow request: %s %s %d (%.0fms) [%s]",
                               request.method, path, response.status_code, duration_ms, request_id)
            elif response.status_code >= 500:
                logger.error("Server error: %s %s %d (%.0fms) [%s]",
                             request.method, path, response.status_code, duration_ms, request_id)
            else:
                logger.debug("Request: %s %s %d (%.0fms) [%s]",
                             request.method, path, response.status_code, duration_ms, request_id)

        return response
