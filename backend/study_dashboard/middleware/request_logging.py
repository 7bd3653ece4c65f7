from __future__ import annotations

import time
import uuid
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from study_dashboard.core.request_context import set_context, clear_context


logger = logging.getLogger("study_dashboard.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and one per response, tagged with x-request-id."""

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        set_context(request_id=rid)

        t0 = time.perf_counter()
        try:
            logger.info(
                "http.request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "has_token": "token" in request.query_params,
                },
            )
            response: Response = await call_next(request)

            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - t0) * 1000),
                },
            )

            response.headers["x-request-id"] = rid
            return response
        finally:
            clear_context()
