from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AlreadyClockedIn(DomainError):
    """Clock-in attempted when today's log is already open or closed."""

    def __init__(self, message: str = "Already clocked in today"):
        super().__init__(message)


class NotClockedIn(DomainError):
    """Clock-out attempted without an open log for today."""

    def __init__(self, message: str = "Not clocked in"):
        super().__init__(message)


class RequestInFlight(DomainError):
    """A mutating request for the same worker-day is still running."""


class RequestFailed(DomainError):
    """Backend or network failure. The reason is passed through as-is."""

    def __init__(self, reason: str, *, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
