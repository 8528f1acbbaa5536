from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import Role
from ..core.exceptions import RequestFailed


@dataclass(frozen=True)
class CurrentUser:
    """The logged-in user as reported by the backend session."""

    user_id: str
    username: str
    first_name: str
    last_name: str
    role: Role

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "CurrentUser":
        try:
            return cls(
                user_id=str(payload["id"]),
                username=str(payload.get("username") or ""),
                first_name=str(payload.get("first_name") or ""),
                last_name=str(payload.get("last_name") or ""),
                role=Role(payload.get("role", Role.VA.value)),
            )
        except (KeyError, ValueError) as e:
            raise RequestFailed(f"Malformed user in response: {e}") from e
