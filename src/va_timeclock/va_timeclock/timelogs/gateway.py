from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimeLog, TimeLogFilter


class TimeLogGateway(Protocol):
    """Interface to the backend that owns time log persistence.

    Note (DIP): the service depends on this protocol, not on HTTP.
    """

    def clock_in(self, worker_id: str) -> TimeLog:
        raise NotImplementedError

    def clock_out(self, worker_id: str) -> TimeLog:
        raise NotImplementedError

    def list_time_logs(self, flt: TimeLogFilter) -> Sequence[TimeLog]:
        raise NotImplementedError

    def get_today(self, worker_id: str) -> Optional[TimeLog]:
        raise NotImplementedError

    def export_csv(self, flt: TimeLogFilter) -> bytes:
        """CSV is generated by the backend; the client only downloads it."""

        raise NotImplementedError
