"""
api_client.py
- Purpose: Python client for the study status endpoint (what the dashboard calls).
- Design: Thin httpx wrapper; error responses become StudyStatusClientError
  carrying the server's message so the UI can show it as-is.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from study_dashboard.core.config import settings
from study_dashboard.schemas.study_status import DashboardView, StudyStatusResponse
from study_dashboard.services.dashboard_view import build_dashboard_view

logger = logging.getLogger("study_dashboard.client")

STATUS_PATH = "/api/study-status"


class StudyStatusClientError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


def _error_from_response(resp: httpx.Response) -> StudyStatusClientError:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    message = body.get("error") or f"Request failed with status {resp.status_code}"
    return StudyStatusClientError(str(message), status_code=resp.status_code, details=body.get("details"))


class StudyStatusClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._http = httpx.Client(
            base_url=base_url or settings.STUDY_STATUS_API_URL,
            timeout=timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "StudyStatusClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def fetch_status(self, token: str) -> StudyStatusResponse:
        try:
            resp = self._http.get(STATUS_PATH, params={"token": token})
        except httpx.HTTPError as e:
            logger.warning("client.request_failed", extra={"error": str(e)})
            raise StudyStatusClientError(f"Could not reach status service: {e}") from e

        if resp.is_error:
            raise _error_from_response(resp)

        try:
            return StudyStatusResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise StudyStatusClientError("Unexpected response from status service", status_code=resp.status_code) from e

    def lookup(self, token: str) -> DashboardView:
        """Fetch and derive the timeline client-side."""
        return build_dashboard_view(token, self.fetch_status(token))
