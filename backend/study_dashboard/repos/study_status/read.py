"""
study_status/read.py
- Purpose: Read-side DB operations for study status events + statistics.
- Design: Keeps query access patterns centralized. Read-only.
"""

import re
from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from study_dashboard.core.config import settings
from study_dashboard.models.study_status import StudyStatusEvent

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class StudyStatusReadRepo:
    def __init__(self, db: Session, *, statistics_function: str | None = None):
        self.db = db
        fn = statistics_function or settings.STATISTICS_FUNCTION
        if not _IDENTIFIER.match(fn):
            raise ValueError(f"Invalid statistics function name: {fn!r}")
        self.statistics_function = fn

    def get_latest(self, study_token: str) -> StudyStatusEvent | None:
        return (
            self.db.query(StudyStatusEvent)
            .filter(StudyStatusEvent.study_token == study_token)
            .order_by(StudyStatusEvent.timestamp.desc())
            .first()
        )

    def list_history(self, study_token: str) -> list[StudyStatusEvent]:
        return (
            self.db.query(StudyStatusEvent)
            .filter(StudyStatusEvent.study_token == study_token)
            .order_by(StudyStatusEvent.timestamp.asc())
            .all()
        )

    def get_statistics(self, hours_ago: int) -> dict[str, Any] | None:
        """
        Call the aggregation routine. It may return a row of columns
        (avg_wait_time, total_processed, success_rate) or a single json column.
        """
        row = (
            self.db.execute(
                text(f"SELECT * FROM {self.statistics_function}(:hours_ago)"),
                {"hours_ago": hours_ago},
            )
            .mappings()
            .first()
        )
        if row is None:
            return None
        values = list(row.values())
        if len(values) == 1 and isinstance(values[0], dict):
            return values[0]
        return dict(row)
