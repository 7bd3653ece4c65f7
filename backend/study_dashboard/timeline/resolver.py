"""study_dashboard/timeline/resolver.py

Turns a single current-status value into the ordered five-stage timeline.

Completion is decided by rank in STAGE_ORDER, never by comparing names.
Only the current stage carries a timestamp unless a status history is
supplied, in which case completed stages take the time of their last
recorded event.
"""


from typing import Iterable

from study_dashboard.constants.stages import STAGE_ORDER, Stage
from study_dashboard.timeline.errors import UnknownStatus
from study_dashboard.timeline.types import StatusEvent, TimelineEntry


def parse_stage(value: Stage | str) -> Stage:
    if isinstance(value, Stage):
        return value
    try:
        return Stage(value)
    except ValueError as e:
        raise UnknownStatus(value) from e


def _history_timestamps(history: Iterable[StatusEvent]) -> dict[Stage, str]:
    # history is oldest first; later events overwrite earlier ones
    seen: dict[Stage, str] = {}
    for event in history:
        seen[parse_stage(event.status)] = event.timestamp or ""
    return seen


def derive_timeline(
    current_status: Stage | str,
    current_timestamp: str,
    history: Iterable[StatusEvent] | None = None,
) -> list[TimelineEntry]:
    current = parse_stage(current_status)
    known = _history_timestamps(history) if history is not None else {}

    entries: list[TimelineEntry] = []
    for stage in STAGE_ORDER:
        completed = stage.rank <= current.rank
        if stage == current:
            timestamp = current_timestamp
        elif completed:
            timestamp = known.get(stage, "")
        else:
            timestamp = ""

        entries.append(
            TimelineEntry(
                status=stage,
                label=stage.label,
                timestamp=timestamp,
                completed=completed,
            )
        )
    return entries
