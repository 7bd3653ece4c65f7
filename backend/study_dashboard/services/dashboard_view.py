"""
dashboard_view.py
- Purpose: Build what the dashboard renders for one token from a lookup result.
- Shared by the /token/<token> route and the Python client.

A study with no recorded status gets no timeline and a "Study not found"
notice; statistics are shown either way.
"""

from typing import Iterable

from study_dashboard.core import ErrorReason
from study_dashboard.schemas.study_status import DashboardView, StudyStatusResponse
from study_dashboard.timeline.resolver import derive_timeline
from study_dashboard.timeline.types import StatusEvent


def build_dashboard_view(
    token: str,
    response: StudyStatusResponse,
    history: Iterable[StatusEvent] | None = None,
) -> DashboardView:
    if response.status is None:
        return DashboardView(
            token=token,
            status=None,
            timeline=None,
            statistics=response.statistics,
            error=ErrorReason.STUDY_NOT_FOUND.value,
        )

    timeline = derive_timeline(response.status.status, response.status.timestamp, history=history)
    return DashboardView(
        token=token,
        status=response.status,
        timeline=timeline,
        statistics=response.statistics,
    )
