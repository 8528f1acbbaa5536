from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date, hours_between
from ..common.validators import require_date_range
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimeLog:
    """Domain entity: one worker's clock-in/clock-out record for one day."""

    worker_id: str
    work_date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    log_id: Optional[int] = None
    worker_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.clock_out is not None:
            if self.clock_in is None:
                raise ValidationError("Clock-out recorded without a clock-in")
            if self.clock_out < self.clock_in:
                raise ValidationError("Clock-out time precedes clock-in time")

    @property
    def total_hours(self) -> float:
        """Hours between clock-in and clock-out; 0.0 while the log is open."""
        if self.clock_in is None or self.clock_out is None:
            return 0.0
        return hours_between(self.clock_in, self.clock_out)

    @property
    def is_open(self) -> bool:
        return self.clock_in is not None and self.clock_out is None


@dataclass(frozen=True)
class TimeLogFilter:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    worker_id: Optional[str] = None

    def validate(self) -> "TimeLogFilter":
        require_date_range(self.start_date, self.end_date)
        return self

    def to_params(self) -> dict[str, str]:
        """Query parameters understood by the backend's list/export routes."""
        params: dict[str, str] = {}
        if self.start_date is not None:
            params["start_date"] = format_iso_date(self.start_date)
        if self.end_date is not None:
            params["end_date"] = format_iso_date(self.end_date)
        if self.worker_id:
            params["user_id"] = str(self.worker_id)
        return params


@dataclass(frozen=True)
class DaySummary:
    """Read-model for the admin dashboard card."""

    work_date: date
    total_hours: float
    active_workers: int
    clocked_in_now: int
    completed: int
