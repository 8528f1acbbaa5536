from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

from ..auth.model import CurrentUser
from ..common.datetime_utils import now_local
from ..core.constants import DISPLAY_TIME_FORMAT, HOURS_DISPLAY_PRECISION
from ..core.enums import ClockStatus
from ..core.exceptions import AuthorizationError, RequestInFlight
from . import lifecycle
from .gateway import TimeLogGateway
from .model import DaySummary, TimeLog, TimeLogFilter
from .queries import apply_filter, summarize_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeLogRowUI:
    date: str
    name: str
    clock_in: str
    clock_out: str
    total_hours: str
    status: str


class TimeLogService:
    """Use case: clock in/out for a worker and read time logs.

    Transitions are validated locally against today's log before anything is
    sent to the gateway; a rejected or failed action leaves state unchanged.
    """

    def __init__(self, gateway: TimeLogGateway, *, clock: Callable[[], datetime] = now_local):
        self._gateway = gateway
        self._clock = clock
        self._in_flight: set[tuple[str, date]] = set()

    @contextmanager
    def _guard(self, worker_id: str, day: date) -> Iterator[None]:
        key = (worker_id, day)
        if key in self._in_flight:
            raise RequestInFlight("A clock request is already in progress")
        self._in_flight.add(key)
        try:
            yield
        finally:
            self._in_flight.discard(key)

    @staticmethod
    def _require_self(worker_id: str, current_user: Optional[CurrentUser]) -> None:
        if current_user is not None and current_user.user_id != str(worker_id):
            raise AuthorizationError("You can only clock in or out for yourself")

    def get_today(self, worker_id: str, *, now: Optional[datetime] = None) -> Optional[TimeLog]:
        now = now or self._clock()
        log = self._gateway.get_today(str(worker_id))
        if log is None or log.work_date != now.date():
            return None
        return log

    def current_status_for(self, worker_id: str, *, now: Optional[datetime] = None) -> ClockStatus:
        return lifecycle.current_status(self.get_today(worker_id, now=now))

    def clock_in(
        self,
        worker_id: str,
        *,
        now: Optional[datetime] = None,
        current_user: Optional[CurrentUser] = None,
    ) -> TimeLog:
        worker_id = str(worker_id)
        now = now or self._clock()
        self._require_self(worker_id, current_user)

        with self._guard(worker_id, now.date()):
            existing = self.get_today(worker_id, now=now)
            lifecycle.clock_in(existing, worker_id=worker_id, now=now)
            log = self._gateway.clock_in(worker_id)

        logger.info("Worker %s clocked in at %s", worker_id, log.clock_in)
        return log

    def clock_out(
        self,
        worker_id: str,
        *,
        now: Optional[datetime] = None,
        current_user: Optional[CurrentUser] = None,
    ) -> TimeLog:
        worker_id = str(worker_id)
        now = now or self._clock()
        self._require_self(worker_id, current_user)

        with self._guard(worker_id, now.date()):
            existing = self.get_today(worker_id, now=now)
            lifecycle.clock_out(existing, now=now)
            log = self._gateway.clock_out(worker_id)

        logger.info("Worker %s clocked out, %.2f hours", worker_id, log.total_hours)
        return log

    def _scoped(self, flt: TimeLogFilter, current_user: Optional[CurrentUser]) -> TimeLogFilter:
        flt = flt.validate()
        if current_user is not None and not current_user.is_admin:
            return replace(flt, worker_id=current_user.user_id)
        return flt

    def list_time_logs(
        self,
        flt: Optional[TimeLogFilter] = None,
        *,
        current_user: Optional[CurrentUser] = None,
    ) -> list[TimeLog]:
        flt = self._scoped(flt or TimeLogFilter(), current_user)
        logs = self._gateway.list_time_logs(flt)
        # Re-apply the filter: the backend's validation of ranges is not guaranteed.
        return apply_filter(logs, flt)

    def summarize_day(
        self,
        day: Optional[date] = None,
        *,
        current_user: Optional[CurrentUser] = None,
    ) -> DaySummary:
        day = day or self._clock().date()
        logs = self.list_time_logs(TimeLogFilter(start_date=day, end_date=day), current_user=current_user)
        return summarize_day(logs, day)

    def export_csv(
        self,
        flt: Optional[TimeLogFilter],
        destination: str | Path,
        *,
        current_user: Optional[CurrentUser] = None,
    ) -> Path:
        if current_user is not None and not current_user.is_admin:
            raise AuthorizationError("Only admins can export time logs")

        flt = (flt or TimeLogFilter()).validate()
        content = self._gateway.export_csv(flt)

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content)
        logger.info("Exported time logs to %s (%d bytes)", destination, len(content))
        return destination

    def history_rows(self, logs: Sequence[TimeLog]) -> list[TimeLogRowUI]:
        return [self._to_ui(log) for log in logs]

    def _to_ui(self, log: TimeLog) -> TimeLogRowUI:
        return TimeLogRowUI(
            date=log.work_date.strftime("%Y-%m-%d"),
            name=log.worker_name or log.worker_id,
            clock_in=log.clock_in.strftime(DISPLAY_TIME_FORMAT) if log.clock_in else "-",
            clock_out=log.clock_out.strftime(DISPLAY_TIME_FORMAT) if log.clock_out else "-",
            total_hours=f"{log.total_hours:.{HOURS_DISPLAY_PRECISION}f}",
            status=lifecycle.current_status(log).label,
        )
