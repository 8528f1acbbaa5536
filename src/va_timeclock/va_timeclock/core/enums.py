from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles returned by the backend session."""

    ADMIN = "admin"
    VA = "va"


class ClockStatus(str, Enum):
    """Daily clock state of one worker."""

    NOT_CLOCKED_IN = "not_clocked_in"
    CLOCKED_IN = "clocked_in"
    CLOCKED_OUT = "clocked_out"

    @property
    def label(self) -> str:
        return {
            ClockStatus.NOT_CLOCKED_IN: "Not Started",
            ClockStatus.CLOCKED_IN: "In Progress",
            ClockStatus.CLOCKED_OUT: "Complete",
        }[self]
