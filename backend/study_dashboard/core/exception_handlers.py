"""
exception_handlers.py
- Purpose: Every failure leaves the API in the flat dashboard format
  {"error": <banner text>, "details": <diagnostic>}.

AppError carries its own status. Anything else is a 500 "Internal server error".

The catch-all handler runs in ServerErrorMiddleware, outside CORS and request
logging, so it restores x-request-id and the allow-origin header itself.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from study_dashboard.core import AppError, ErrorCode, ErrorReason
from study_dashboard.core.config import settings
from study_dashboard.core.request_context import get_context

logger = logging.getLogger("study_dashboard.exceptions")


def _request_id(request: Request) -> str | None:
    return get_context().get("request_id") or request.headers.get("x-request-id")


def _log_fields(request: Request, **extra) -> dict:
    fields = {"path": request.url.path, "method": request.method, "request_id": _request_id(request)}
    fields.update(extra)
    return fields


def _allowed_origin(origin: str | None) -> str | None:
    if not origin:
        return None
    allowed = settings.cors_origins
    if "*" in allowed:
        return "*"
    return origin if origin in allowed else None


def _restore_edge_headers(request: Request, resp: JSONResponse) -> JSONResponse:
    rid = _request_id(request)
    if rid:
        resp.headers["x-request-id"] = rid
    origin = _allowed_origin(request.headers.get("origin"))
    if origin:
        resp.headers["access-control-allow-origin"] = origin
        if origin != "*":
            resp.headers["vary"] = "Origin"
    return resp


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "app_error",
        extra=_log_fields(
            request,
            status_code=exc.status_code,
            code=exc.code.value if isinstance(exc.code, ErrorCode) else exc.code,
            reason=exc.reason,
            details=exc.details,
        ),
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", extra=_log_fields(request))
    resp = JSONResponse(
        status_code=500,
        content={"error": ErrorReason.INTERNAL_ERROR.value, "details": str(exc) or type(exc).__name__},
    )
    return _restore_edge_headers(request, resp)
