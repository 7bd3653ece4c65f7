"""
study_status.py (schemas)
- Purpose: Response DTOs for the study status lookup.
- Design: Python attributes are snake_case; the wire format is camelCase
  (averageWaitTime, ...). Helper constructors keep service mapping DRY.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from study_dashboard.constants.stages import Stage
from study_dashboard.timeline.types import TimelineEntry

QUEUE_TIME_FACTOR = Decimal("0.8")


def to_decimal(value: Any) -> Decimal:
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"not a number: {value!r}") from None
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return number


def round_half_up(value: Any, places: int = 0) -> Decimal:
    """Round like JS Math.round (halves go up), not banker's rounding."""
    return to_decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusRecord(BaseModel):
    """Latest known state of a study."""
    status: Stage
    timestamp: str


class StatusHistoryEntry(BaseModel):
    status: Stage
    timestamp: str


class StatisticsSnapshot(CamelModel):
    average_wait_time: int = 0        # minutes
    estimated_queue_time: int = 0     # minutes
    total_processed: int = 0
    success_rate: float = 0.0         # percentage, 0-100

    @classmethod
    def from_aggregate(cls, raw: Optional[dict[str, Any]]) -> "StatisticsSnapshot":
        """
        Map the aggregation routine's row (avg_wait_time, total_processed,
        success_rate) to the wire snapshot. Missing data means zeros.

        Raises ValueError naming the offending column when a value is not a
        finite number.
        """
        raw = raw or {}

        def field(name: str, places: int | None = 0) -> Decimal:
            value = raw.get(name) or 0
            try:
                return to_decimal(value) if places is None else round_half_up(value, places)
            except ValueError as e:
                raise ValueError(f"{name}: {e}") from None

        average = int(field("avg_wait_time"))
        return cls(
            average_wait_time=average,
            estimated_queue_time=int(round_half_up(average * QUEUE_TIME_FACTOR)),
            total_processed=int(field("total_processed", None)),
            success_rate=float(field("success_rate", 2)),
        )


class StudyStatusResponse(BaseModel):
    status: Optional[StatusRecord] = None
    statistics: StatisticsSnapshot


class DashboardView(BaseModel):
    """What the dashboard renders for one token."""
    token: str
    status: Optional[StatusRecord] = None
    timeline: Optional[list[TimelineEntry]] = None
    statistics: Optional[StatisticsSnapshot] = None
    error: Optional[str] = None
