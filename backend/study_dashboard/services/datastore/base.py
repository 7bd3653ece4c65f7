"""
datastore/base.py
- Purpose: The one interface the status service reads through.
- Design: Infrastructure adapters only; they return raw values and never
  interpret the status string. Driver failures become AppError(DB_ERROR).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class StoredStatus:
    status: str
    timestamp: str


def to_iso(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return "" if value is None else str(value)


def normalize_aggregate(data: Any) -> dict[str, Any] | None:
    """The aggregation routine may answer with an object, a one-row set, or nothing."""
    if isinstance(data, list):
        data = data[0] if data else None
    if not data:
        return None
    return dict(data)


class StudyStatusStore(ABC):
    @abstractmethod
    def latest_status(self, token: str) -> StoredStatus | None:
        """Most recent status event for the token, or None."""

    @abstractmethod
    def status_history(self, token: str) -> list[StoredStatus]:
        """Every status event for the token, oldest first."""

    @abstractmethod
    def statistics(self, hours_ago: int) -> dict[str, Any] | None:
        """Raw aggregate over the trailing window, or None when there is no data."""
