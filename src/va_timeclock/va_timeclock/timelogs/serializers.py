from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.exceptions import RequestFailed, ValidationError
from .model import TimeLog


def _worker_name(payload: Mapping[str, Any]) -> Optional[str]:
    user = payload.get("user") or {}
    name = f"{user.get('first_name') or ''} {user.get('last_name') or ''}".strip()
    return name or None


def time_log_from_json(payload: Mapping[str, Any]) -> TimeLog:
    """Build a TimeLog from the backend's JSON shape.

    ``total_hours`` on the wire is ignored; it is always derived locally.
    """
    try:
        log_id = payload.get("id")
        return TimeLog(
            worker_id=str(payload["user_id"]),
            work_date=parse_iso_date(str(payload["date"])[:10]),
            clock_in=parse_iso_datetime(payload.get("clock_in")),
            clock_out=parse_iso_datetime(payload.get("clock_out")),
            log_id=int(log_id) if log_id is not None else None,
            worker_name=_worker_name(payload),
        )
    except (KeyError, TypeError, ValueError, ValidationError) as e:
        raise RequestFailed(f"Malformed time log in response: {e}") from e


def time_log_to_json(log: TimeLog) -> dict[str, Any]:
    return {
        "id": log.log_id,
        "user_id": log.worker_id,
        "date": log.work_date.isoformat(),
        "clock_in": log.clock_in.isoformat() if log.clock_in else None,
        "clock_out": log.clock_out.isoformat() if log.clock_out else None,
        "total_hours": round(log.total_hours, 2),
    }
