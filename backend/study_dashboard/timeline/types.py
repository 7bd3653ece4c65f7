"""study_dashboard/timeline/types.py

Lightweight dataclasses for the derived, display-only timeline.
Recomputed on every lookup; never persisted.
"""


from dataclasses import dataclass
from typing import Protocol

from study_dashboard.constants.stages import Stage


@dataclass(frozen=True)
class TimelineEntry:
    status: Stage
    label: str
    timestamp: str  # ISO-8601, "" when unknown
    completed: bool


class StatusEvent(Protocol):
    """Anything carrying a recorded status + its timestamp (history rows)."""

    status: str
    timestamp: str
