# study_dashboard/services/status_service.py
"""
status_service.py
- Purpose: Resolve a study token to its latest status + the statistics snapshot.
- Owns: token validation, stage validation, statistics derivation, logging.
- Design: Read-only. At most two sequential store queries per lookup
  (status, then statistics); any store failure fails the whole lookup.
"""


import logging

from study_dashboard.core import AppError
from study_dashboard.core.config import settings
from study_dashboard.core.errors import internal_error, unknown_status
from study_dashboard.core.request_context import set_context
from study_dashboard.schemas.study_status import (
    DashboardView,
    StatisticsSnapshot,
    StatusHistoryEntry,
    StatusRecord,
    StudyStatusResponse,
)
from study_dashboard.services.dashboard_view import build_dashboard_view
from study_dashboard.services.datastore.base import StoredStatus, StudyStatusStore
from study_dashboard.timeline.errors import UnknownStatus
from study_dashboard.timeline.resolver import parse_stage
from study_dashboard.validations.token_validators import normalize_token

logger = logging.getLogger("study_dashboard.status_service")


class StatusService:
    def __init__(self, store: StudyStatusStore, *, window_hours: int | None = None):
        self.store = store
        self.window_hours = window_hours if window_hours is not None else settings.STATISTICS_WINDOW_HOURS

    def _to_record(self, stored: StoredStatus) -> StatusRecord:
        try:
            stage = parse_stage(stored.status)
        except UnknownStatus as e:
            logger.error("study_status.unknown_status", extra={"status": stored.status})
            raise unknown_status(stored.status) from e
        return StatusRecord(status=stage, timestamp=stored.timestamp)

    def _guard(self, fn, *args):
        try:
            return fn(*args)
        except AppError:
            raise
        except Exception as e:
            logger.exception("study_status.store_error")
            raise internal_error(details=str(e)) from e

    def _statistics(self) -> StatisticsSnapshot:
        raw_stats = self._guard(self.store.statistics, self.window_hours)
        try:
            return StatisticsSnapshot.from_aggregate(raw_stats)
        except (TypeError, ValueError) as e:
            logger.error("study_status.bad_statistics", extra={"details": str(e)})
            raise internal_error(details=f"Invalid statistics from {settings.STATISTICS_FUNCTION}: {e}") from e

    def _resolve(self, token: str) -> StudyStatusResponse:
        """Lookup for an already normalized token: status first, then statistics."""
        set_context(study_token=token)

        stored = self._guard(self.store.latest_status, token)
        statistics = self._statistics()

        record = self._to_record(stored) if stored is not None else None
        if record is None:
            logger.info("study_status.not_found")
        else:
            logger.info("study_status.lookup", extra={"status": record.status.value})

        return StudyStatusResponse(status=record, statistics=statistics)

    def resolve_status(self, token: str | None) -> StudyStatusResponse:
        return self._resolve(normalize_token(token))

    def check_store(self) -> StatisticsSnapshot:
        """One statistics round trip, used by the store health check."""
        return self._statistics()

    def _history(self, token: str) -> list[StatusHistoryEntry]:
        rows = self._guard(self.store.status_history, token)
        return [StatusHistoryEntry(status=self._to_record(r).status, timestamp=r.timestamp) for r in rows]

    def status_history(self, token: str | None) -> list[StatusHistoryEntry]:
        return self._history(normalize_token(token))

    def dashboard_view(self, token: str | None, *, use_history: bool | None = None) -> DashboardView:
        """Same lookup as the search form; timeline derived server side."""
        token = normalize_token(token)
        response = self._resolve(token)

        if use_history is None:
            use_history = settings.TIMELINE_USE_HISTORY
        history = self._history(token) if use_history and response.status is not None else None

        try:
            return build_dashboard_view(token, response, history=history)
        except UnknownStatus as e:
            raise unknown_status(e.value) from e
