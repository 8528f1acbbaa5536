from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import RequestFailed
from .gateway import TimeLogGateway
from .model import TimeLog, TimeLogFilter
from .serializers import time_log_from_json

logger = logging.getLogger(__name__)


class HttpTimeLogGateway(TimeLogGateway):
    def __init__(self, api: ApiClient):
        self._api = api

    def _single(self, data: dict) -> TimeLog:
        payload = data.get("time_log")
        if not payload:
            raise RequestFailed("Response did not include a time log")
        return time_log_from_json(payload)

    def clock_in(self, worker_id: str) -> TimeLog:
        data = self._api.post("/time-logs/clock-in", json={"user_id": worker_id})
        return self._single(data)

    def clock_out(self, worker_id: str) -> TimeLog:
        data = self._api.post("/time-logs/clock-out", json={"user_id": worker_id})
        return self._single(data)

    def list_time_logs(self, flt: TimeLogFilter) -> Sequence[TimeLog]:
        data = self._api.get("/time-logs", params=flt.to_params())
        rows = data.get("time_logs") or []
        logger.debug("Fetched %d time logs", len(rows))
        return [time_log_from_json(r) for r in rows]

    def get_today(self, worker_id: str) -> Optional[TimeLog]:
        data = self._api.get("/time-logs/today")
        payload = data.get("time_log")
        return time_log_from_json(payload) if payload else None

    def export_csv(self, flt: TimeLogFilter) -> bytes:
        return self._api.download("/time-logs/export", params=flt.to_params())
