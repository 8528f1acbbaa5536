from __future__ import annotations

import logging

from ..api.client import ApiClient
from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, RequestFailed
from .model import CurrentUser

logger = logging.getLogger(__name__)


class HttpAuthGateway:
    """Session login/logout against ``/auth``; the cookie lives in the ApiClient."""

    def __init__(self, api: ApiClient):
        self._api = api

    def login(self, username: str, password: str) -> CurrentUser:
        username = require_non_empty(username, "Username")
        password = require_non_empty(password, "Password")
        try:
            data = self._api.post("/auth/login", json={"username": username, "password": password})
        except RequestFailed as e:
            if e.status_code in (400, 401):
                raise AuthenticationError(e.reason) from e
            raise
        user = CurrentUser.from_json(data.get("user") or {})
        logger.info("Logged in as %s (%s)", user.username, user.role.value)
        return user

    def logout(self) -> None:
        self._api.post("/auth/logout")

    def me(self) -> CurrentUser:
        data = self._api.get("/auth/me")
        return CurrentUser.from_json(data.get("user") or {})
