from __future__ import annotations

from datetime import date, datetime

from va_timeclock.timelogs.model import TimeLog, TimeLogFilter
from va_timeclock.timelogs.queries import (
    aggregate_hours_for_day,
    apply_filter,
    filter_logs,
    summarize_day,
    total_hours_by_worker,
)


def _log(worker_id: str, day: date, start_hour: int | None = 9, end_hour: int | None = 17) -> TimeLog:
    return TimeLog(
        worker_id=worker_id,
        work_date=day,
        clock_in=datetime.combine(day, datetime.min.time()).replace(hour=start_hour) if start_hour is not None else None,
        clock_out=datetime.combine(day, datetime.min.time()).replace(hour=end_hour) if end_hour is not None else None,
    )


def _mixed_logs() -> list[TimeLog]:
    return [
        _log("w1", date(2023, 12, 30)),
        _log("w2", date(2024, 1, 2)),
        _log("w1", date(2024, 1, 3)),
        _log("w1", date(2023, 12, 31)),
        _log("w2", date(2023, 12, 15)),
        _log("w1", date(2024, 1, 31)),
        _log("w1", date(2024, 2, 1)),
    ]


def test_filter_returns_only_workers_january_logs_in_input_order():
    result = filter_logs(_mixed_logs(), start_date=date(2024, 1, 1), end_date=date(2024, 1, 31), worker_id="w1")

    assert [(r.worker_id, r.work_date) for r in result] == [
        ("w1", date(2024, 1, 3)),
        ("w1", date(2024, 1, 31)),
    ]


def test_filter_bounds_are_optional():
    logs = _mixed_logs()

    assert filter_logs(logs) == logs
    assert [r.work_date for r in filter_logs(logs, end_date=date(2023, 12, 31))] == [
        date(2023, 12, 30),
        date(2023, 12, 31),
        date(2023, 12, 15),
    ]
    assert [r.work_date for r in filter_logs(logs, start_date=date(2024, 1, 31))] == [
        date(2024, 1, 31),
        date(2024, 2, 1),
    ]


def test_filter_is_idempotent():
    flt = TimeLogFilter(start_date=date(2023, 12, 31), end_date=date(2024, 1, 31), worker_id="w1")
    once = apply_filter(_mixed_logs(), flt)
    assert apply_filter(once, flt) == once


def test_empty_worker_id_means_all_workers():
    assert len(filter_logs(_mixed_logs(), worker_id="")) == 7


def test_inverted_range_matches_nothing():
    assert filter_logs(_mixed_logs(), start_date=date(2024, 2, 1), end_date=date(2024, 1, 1)) == []


def test_aggregate_hours_sums_all_workers_for_the_day():
    day = date(2024, 1, 15)
    logs = [
        _log("w1", day, 9, 17),
        _log("w2", day, 8, 12),
        _log("w3", day, 10, None),
        _log("w1", date(2024, 1, 16), 9, 17),
    ]
    assert aggregate_hours_for_day(logs, day) == 12.0
    empty = aggregate_hours_for_day(logs, date(2024, 1, 17))
    assert empty == 0.0
    assert isinstance(empty, float)


def test_summarize_day_counts_open_and_closed_logs():
    day = date(2024, 1, 15)
    logs = [_log("w1", day, 9, 17), _log("w2", day, 10, None), _log("w3", day, 11, None)]

    summary = summarize_day(logs, day)

    assert summary.total_hours == 8.0
    assert summary.active_workers == 3
    assert summary.clocked_in_now == 2
    assert summary.completed == 1


def test_total_hours_by_worker_sorted_desc():
    logs = [
        _log("w1", date(2024, 1, 1), 9, 12),
        _log("w2", date(2024, 1, 1), 9, 17),
        _log("w1", date(2024, 1, 2), 9, 13),
    ]
    summary = total_hours_by_worker(logs)

    assert [s["worker_id"] for s in summary] == ["w2", "w1"]
    assert summary[1]["total_hours"] == 7.0
