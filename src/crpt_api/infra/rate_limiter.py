from __future__ import annotations

import logging
from collections import deque
from threading import Lock

from ..core.cancellation import CancellationToken
from ..core.errors import ConfigurationError, InterruptedWaitError
from ..core.ports.clock_port import ClockPort, SystemClock
from ..core.ports.rate_limiter_port import RateLimiterPort

logger = logging.getLogger(__name__)


class SlidingWindowRateLimiter(RateLimiterPort):
    """Sliding window rate limiter that tracks admissions over a time window.

    At most ``max_requests`` admissions fall inside any trailing window of
    ``window_seconds``. Callers over the limit are blocked, never rejected.
    One limiter is meant to be shared by every thread talking to the registry.

    The lock is held only while inspecting or updating the admission log, never
    while sleeping. Waiters recheck the log after each wake-up, so admission is
    only roughly FIFO: when several waiters wake for the same slot, whichever
    re-enters the lock first wins and the others go back to sleep.

    Example:
        # Registry quota: 100 documents per minute
        limiter = SlidingWindowRateLimiter(max_requests=100, window_seconds=60.0)

        # Give up after 5 seconds, or when the shutdown token fires
        limiter.acquire(cancel_token=shutdown, timeout=5.0)
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: ClockPort | None = None,
    ) -> None:
        """Initialize sliding window rate limiter.

        Args:
            max_requests: Maximum number of admissions allowed in the time window
            window_seconds: Time window in seconds (e.g., 60.0 for one minute)
            clock: Optional monotonic clock; defaults to SystemClock

        Raises:
            ConfigurationError: If max_requests or window_seconds is not positive
        """
        if max_requests <= 0:
            raise ConfigurationError(f"Request limit must be positive, got {max_requests}")
        if window_seconds <= 0:
            raise ConfigurationError(f"Window duration must be positive, got {window_seconds}")
        self._max_requests = max_requests
        self._window = float(window_seconds)
        self._clock = clock or SystemClock()
        self._timestamps: deque[float] = deque()
        self._lock = Lock()

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_seconds(self) -> float:
        return self._window

    def acquire(
        self,
        cancel_token: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> None:
        """Acquire permission to make a request, blocking if necessary.

        Args:
            cancel_token: Optional token; cancelling it wakes this caller and
                raises InterruptedWaitError.
            timeout: Optional maximum number of seconds to wait for a slot.

        Raises:
            InterruptedWaitError: If cancelled or timed out before admission.
                Nothing is recorded in that case.
        """
        deadline = None if timeout is None else self._clock.monotonic() + max(0.0, timeout)

        while True:
            with self._lock:
                if cancel_token is not None and cancel_token.is_cancelled():
                    raise InterruptedWaitError("Interrupted while waiting for rate limit")

                now = self._clock.monotonic()
                self._evict(now)

                if len(self._timestamps) < self._max_requests:
                    self._admit(now)
                    return

                if deadline is not None and now >= deadline:
                    raise InterruptedWaitError(
                        f"Timed out after {timeout}s waiting for rate limit"
                    )

                # Oldest admission leaves the window at oldest + window
                wait = max(0.0, self._timestamps[0] + self._window - now)
                if deadline is not None:
                    wait = min(wait, deadline - now)

            logger.debug("Rate limit reached (%d/%.3fs), waiting %.3fs", self._max_requests, self._window, wait)
            self._pause(wait, cancel_token)

    def admissions(self) -> tuple[float, ...]:
        """Return the admission timestamps still inside the window, oldest first."""
        with self._lock:
            self._evict(self._clock.monotonic())
            return tuple(self._timestamps)

    def _evict(self, now: float) -> None:
        cutoff = now - self._window
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()

    def _admit(self, now: float) -> None:
        self._timestamps.append(now)

    def _pause(self, seconds: float, cancel_token: CancellationToken | None) -> None:
        if cancel_token is None:
            self._clock.sleep(seconds)
            return
        if cancel_token.wait(seconds):
            raise InterruptedWaitError("Interrupted while waiting for rate limit")
