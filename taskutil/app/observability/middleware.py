from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import get_logger

logger = get_logger("request")


class TraceLoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request: INFO when served, WARNING on a server fault
    (for /uid that means the random source gave out).
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        start = time.perf_counter()
        response = await call_next(request)
        fields = {
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 3),
        }

        if response.status_code >= 500:
            logger.warning("Request failed", extra=fields)
        else:
            logger.info("Request served", extra=fields)
        return response
