"""Failure types raised by the registry client.

Every failure a caller can see derives from :class:`CrptApiError`, so callers
that do not care about the distinction can catch a single type. None of them
are retried automatically; retry policy belongs to the caller.
"""

from __future__ import annotations


class CrptApiError(Exception):
    """Base error for registry client failures."""


class ConfigurationError(CrptApiError):
    """Raised when the client or limiter is constructed with invalid settings."""


class InterruptedWaitError(CrptApiError):
    """Raised when a caller is cancelled or times out while waiting for admission.

    No admission is recorded for the interrupted caller.
    """


class TransportError(CrptApiError):
    """Raised when the registry could not be reached (network error or timeout)."""


class ApiError(CrptApiError):
    """Raised when the registry answers with a non-200 status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"API request failed with status: {status}, body: {body}")
        self.status = status
        self.body = body


class ProtocolError(CrptApiError):
    """Raised when a 200 response does not carry the expected document id."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(f"{message}: {body}")
        self.body = body
