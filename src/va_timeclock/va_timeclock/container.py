from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import httpx

from .api.client import ApiClient
from .auth.gateway import HttpAuthGateway
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .timelogs.http_gateway import HttpTimeLogGateway
from .timelogs.service import TimeLogService


@dataclass(frozen=True)
class Container:
    api: ApiClient

    auth_gateway: HttpAuthGateway
    time_log_gateway: HttpTimeLogGateway

    time_log_service: TimeLogService

    def close(self) -> None:
        self.api.close()


def build_container(
    *,
    api_config: dict,
    transport: Optional[httpx.BaseTransport] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    api = ApiClient(
        str(api_config.get("base_url", DEFAULT_API_BASE_URL)),
        timeout=float(api_config.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
        transport=transport,
    )

    auth_gateway = HttpAuthGateway(api)
    time_log_gateway = HttpTimeLogGateway(api)
    time_log_service = TimeLogService(time_log_gateway, clock=clock)

    return Container(
        api=api,
        auth_gateway=auth_gateway,
        time_log_gateway=time_log_gateway,
        time_log_service=time_log_service,
    )
