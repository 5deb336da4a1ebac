from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..cancellation import CancellationToken


class RateLimiterPort(Protocol):
    def acquire(
        self,
        cancel_token: "CancellationToken | None" = None,
        timeout: float | None = None,
    ) -> None:
        """Block until a permit is available according to the configured rate.

        Raises InterruptedWaitError if cancelled or if ``timeout`` seconds pass
        without a permit.
        """
