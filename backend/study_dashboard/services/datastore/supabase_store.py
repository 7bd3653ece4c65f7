"""
supabase_store.py
- Purpose: StudyStatusStore adapter for Supabase (PostgREST table + RPC).
- Design: Treat as an infrastructure adapter; no business logic.
"""

import logging
from typing import Any

from study_dashboard.core import AppError, ErrorCode
from study_dashboard.core.config import settings
from study_dashboard.core.errors import internal_error
from study_dashboard.services.datastore.base import (
    StoredStatus,
    StudyStatusStore,
    normalize_aggregate,
    to_iso,
)

logger = logging.getLogger("study_dashboard.datastore.supabase")


class SupabaseStudyStatusStore(StudyStatusStore):
    """
    Minimal adapter around the Supabase client.

    Assumptions:
    - Service role key (reads bypass RLS), no session persistence
    - Table `study_status(study_token, status, timestamp)`
    - RPC `get_study_statistics(hours_ago)` returns one aggregate object
    """

    def __init__(self, client: Any = None, *, table: str | None = None, statistics_function: str | None = None):
        self._client = client
        self._table = table or settings.STATUS_TABLE
        self._statistics_function = statistics_function or settings.STATISTICS_FUNCTION

    @property
    def client(self):
        # Created on first query so a 400 never needs Supabase configured.
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        # Import lazily so missing dependency errors are localized.
        try:
            from supabase import create_client  # type: ignore
        except Exception as e:
            raise internal_error(
                code=ErrorCode.CONFIG_ERROR,
                details="Supabase client library is not installed or failed to import",
            ) from e

        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
            raise internal_error(
                code=ErrorCode.CONFIG_ERROR,
                details="SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set",
            )
        return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)

    def _select_status(self, token: str, *, latest_only: bool) -> list[dict[str, Any]]:
        query = (
            self.client.table(self._table)
            .select("status, timestamp")
            .eq("study_token", token)
            .order("timestamp", desc=latest_only)
        )
        if latest_only:
            query = query.limit(1)
        try:
            res = query.execute()
        except Exception as e:
            logger.error("study_status.status_query_failed", extra={"error": str(e)})
            raise internal_error(code=ErrorCode.DB_ERROR, details=str(e)) from e
        return list(getattr(res, "data", None) or [])

    def latest_status(self, token: str) -> StoredStatus | None:
        rows = self._select_status(token, latest_only=True)
        if not rows:
            return None
        row = rows[0]
        return StoredStatus(status=row.get("status"), timestamp=to_iso(row.get("timestamp")))

    def status_history(self, token: str) -> list[StoredStatus]:
        rows = self._select_status(token, latest_only=False)
        return [StoredStatus(status=r.get("status"), timestamp=to_iso(r.get("timestamp"))) for r in rows]

    def statistics(self, hours_ago: int) -> dict[str, Any] | None:
        try:
            res = self.client.rpc(self._statistics_function, {"hours_ago": hours_ago}).execute()
        except AppError:
            raise
        except Exception as e:
            logger.error("study_status.statistics_query_failed", extra={"error": str(e)})
            raise internal_error(code=ErrorCode.DB_ERROR, details=str(e)) from e
        return normalize_aggregate(getattr(res, "data", None))
