"""Clock-in/clock-out state machine.

States per worker per day: NOT_CLOCKED_IN -> CLOCKED_IN -> CLOCKED_OUT.
Every transition takes the current time explicitly and returns a new TimeLog;
the input log is never modified.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import ClockStatus
from ..core.exceptions import AlreadyClockedIn, NotClockedIn, ValidationError
from .model import TimeLog


def current_status(log: Optional[TimeLog]) -> ClockStatus:
    if log is None or log.clock_in is None:
        return ClockStatus.NOT_CLOCKED_IN
    if log.clock_out is None:
        return ClockStatus.CLOCKED_IN
    return ClockStatus.CLOCKED_OUT


def _log_for_day(log: Optional[TimeLog], now: datetime) -> Optional[TimeLog]:
    # A log from another day does not carry over: a new day starts fresh.
    if log is not None and log.work_date != now.date():
        return None
    return log


def clock_in(log: Optional[TimeLog], *, worker_id: str, now: datetime) -> TimeLog:
    today_log = _log_for_day(log, now)
    if current_status(today_log) is not ClockStatus.NOT_CLOCKED_IN:
        raise AlreadyClockedIn()

    return TimeLog(
        worker_id=worker_id,
        work_date=now.date(),
        clock_in=now,
        clock_out=None,
        log_id=today_log.log_id if today_log else None,
        worker_name=today_log.worker_name if today_log else None,
    )


def clock_out(log: Optional[TimeLog], *, now: datetime) -> TimeLog:
    log = _log_for_day(log, now)
    if log is None or current_status(log) is not ClockStatus.CLOCKED_IN:
        raise NotClockedIn()

    if now < log.clock_in:
        raise ValidationError("Clock-out time precedes clock-in time")

    return TimeLog(
        worker_id=log.worker_id,
        work_date=log.work_date,
        clock_in=log.clock_in,
        clock_out=now,
        log_id=log.log_id,
        worker_name=log.worker_name,
    )
