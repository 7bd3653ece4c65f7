"""
Request context helpers.

We keep a small context (request_id, study_token) in ContextVars.
The HTTP middleware and the status service set these values so every log
line emitted while serving a lookup can be correlated.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_study_token: ContextVar[Optional[str]] = ContextVar("study_token", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    study_token: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if study_token is not None:
        _study_token.set(study_token)


def clear_context() -> None:
    _request_id.set(None)
    _study_token.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    token = _study_token.get()

    if rid:
        ctx["request_id"] = rid
    if token:
        ctx["study_token"] = token
    return ctx
