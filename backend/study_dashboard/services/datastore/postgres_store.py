"""
postgres_store.py
- Purpose: StudyStatusStore backed by the SQLAlchemy session (DATABASE_URL).
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from study_dashboard.core import ErrorCode
from study_dashboard.core.errors import internal_error
from study_dashboard.repos.study_status.read import StudyStatusReadRepo
from study_dashboard.services.datastore.base import (
    StoredStatus,
    StudyStatusStore,
    normalize_aggregate,
    to_iso,
)

logger = logging.getLogger("study_dashboard.datastore.postgres")


class SqlStudyStatusStore(StudyStatusStore):
    def __init__(self, db: Session, *, statistics_function: str | None = None):
        self.db = db
        self.repo = StudyStatusReadRepo(db, statistics_function=statistics_function)

    def latest_status(self, token: str) -> StoredStatus | None:
        try:
            row = self.repo.get_latest(token)
        except SQLAlchemyError as e:
            logger.error("study_status.status_query_failed", extra={"error": str(e)})
            raise internal_error(code=ErrorCode.DB_ERROR, details=str(e)) from e
        if row is None:
            return None
        return StoredStatus(status=row.status, timestamp=to_iso(row.timestamp))

    def status_history(self, token: str) -> list[StoredStatus]:
        try:
            rows = self.repo.list_history(token)
        except SQLAlchemyError as e:
            logger.error("study_status.history_query_failed", extra={"error": str(e)})
            raise internal_error(code=ErrorCode.DB_ERROR, details=str(e)) from e
        return [StoredStatus(status=r.status, timestamp=to_iso(r.timestamp)) for r in rows]

    def statistics(self, hours_ago: int) -> dict[str, Any] | None:
        try:
            return normalize_aggregate(self.repo.get_statistics(hours_ago))
        except SQLAlchemyError as e:
            logger.error("study_status.statistics_query_failed", extra={"error": str(e)})
            raise internal_error(code=ErrorCode.DB_ERROR, details=str(e)) from e
