"""
study_status.py
- Purpose: One row per status event a study passes through.
- The latest row (by timestamp) for a token is the study's current status.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from study_dashboard.models.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StudyStatusEvent(Base):
    __tablename__ = "study_status"

    __table_args__ = (
        # Latest-status lookup: filter by token, newest first
        Index("ix_study_status_token_timestamp", "study_token", "timestamp"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    study_token: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
