from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Expose handler latency as ``Server-Timing`` and log one line per request.

    Requests slower than ``slow_ms`` are logged at WARNING.
    """

    def __init__(self, app: ASGIApp, slow_ms: float = 500.0) -> None:
        super().__init__(app)
        self._slow_ms = slow_ms

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        response.headers["Server-Timing"] = f"app;dur={duration_ms:.1f}"

        level = logging.WARNING if duration_ms >= self._slow_ms else logging.INFO
        logger.log(
            level,
            "%s %s?%s -> %d in %.1fms",
            request.method,
            request.url.path,
            request.url.query,
            response.status_code,
            duration_ms,
        )
        return response
