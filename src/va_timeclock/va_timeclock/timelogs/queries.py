"""Pure computations over already-fetched time logs."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.enums import ClockStatus
from .lifecycle import current_status
from .model import DaySummary, TimeLog, TimeLogFilter


def filter_logs(
    logs: Iterable[TimeLog],
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    worker_id: Optional[str] = None,
) -> list[TimeLog]:
    """Logs dated within [start_date, end_date] (inclusive) for worker_id.

    Each bound is optional. Input order is preserved.
    """
    out: list[TimeLog] = []
    for log in logs:
        if start_date is not None and log.work_date < start_date:
            continue
        if end_date is not None and log.work_date > end_date:
            continue
        if worker_id and log.worker_id != str(worker_id):
            continue
        out.append(log)
    return out


def apply_filter(logs: Iterable[TimeLog], flt: TimeLogFilter) -> list[TimeLog]:
    return filter_logs(logs, start_date=flt.start_date, end_date=flt.end_date, worker_id=flt.worker_id)


def aggregate_hours_for_day(logs: Iterable[TimeLog], day: date) -> float:
    return sum((log.total_hours for log in logs if log.work_date == day), 0.0)


def summarize_day(logs: Iterable[TimeLog], day: date) -> DaySummary:
    day_logs = [log for log in logs if log.work_date == day]
    statuses = [current_status(log) for log in day_logs]
    return DaySummary(
        work_date=day,
        total_hours=aggregate_hours_for_day(day_logs, day),
        active_workers=len({log.worker_id for log in day_logs if log.clock_in is not None}),
        clocked_in_now=statuses.count(ClockStatus.CLOCKED_IN),
        completed=statuses.count(ClockStatus.CLOCKED_OUT),
    )


def total_hours_by_worker(logs: Iterable[TimeLog]) -> list[dict]:
    summary_map: dict[str, dict] = {}
    for log in logs:
        s = summary_map.get(log.worker_id)
        if not s:
            s = {"worker_id": log.worker_id, "worker_name": log.worker_name, "total_hours": 0.0}
            summary_map[log.worker_id] = s
        s["total_hours"] += log.total_hours

    summary = list(summary_map.values())
    summary.sort(key=lambda x: x["total_hours"], reverse=True)
    return summary
