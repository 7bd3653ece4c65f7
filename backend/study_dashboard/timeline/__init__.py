from study_dashboard.timeline.errors import UnknownStatus
from study_dashboard.timeline.resolver import derive_timeline, parse_stage
from study_dashboard.timeline.types import TimelineEntry

__all__ = ["UnknownStatus", "derive_timeline", "parse_stage", "TimelineEntry"]
