from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..core.constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from ..core.exceptions import RequestFailed

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin JSON wrapper around an ``httpx.Client`` for the backend's /api routes.

    The session cookie set by ``/auth/login`` is kept in the client's cookie jar,
    so one ApiClient represents one logged-in session.
    Every failure (transport error, timeout, non-2xx status, non-JSON body)
    surfaces as ``RequestFailed`` with the backend's ``error`` message when
    there is one.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(float(timeout)),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = self._client.request(method, endpoint, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out: %s", method, endpoint, exc)
            raise RequestFailed(f"Request timed out: {method} {endpoint}") from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, endpoint, exc)
            raise RequestFailed(str(exc) or "Request error") from exc

        logger.debug("%s %s -> %s", method, endpoint, resp.status_code)
        if resp.is_error:
            raise RequestFailed(self._error_reason(resp), status_code=resp.status_code)
        return resp

    @staticmethod
    def _error_reason(resp: httpx.Response) -> str:
        try:
            data = resp.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return "An error occurred"

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> dict:
        resp = self._send(method, endpoint, params=params, json=json)
        try:
            data = resp.json()
        except ValueError as exc:
            raise RequestFailed("Invalid JSON in response", status_code=resp.status_code) from exc
        if not isinstance(data, dict):
            raise RequestFailed("Unexpected response shape", status_code=resp.status_code)
        return data

    def get(self, endpoint: str, *, params: Optional[dict] = None) -> dict:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, *, json: Optional[dict] = None) -> dict:
        return self.request("POST", endpoint, json=json)

    def download(self, endpoint: str, *, params: Optional[dict] = None) -> bytes:
        resp = self._send("GET", endpoint, params=params)
        return resp.content
