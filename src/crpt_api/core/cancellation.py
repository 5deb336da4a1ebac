"""Cooperative cancellation for callers blocked on the rate limiter.

Python threads cannot be interrupted from outside, so a waiting caller sleeps
on a :class:`CancellationToken` instead of ``time.sleep``. Cancelling the token
from any other thread wakes that caller (and only that caller) immediately.
"""

from __future__ import annotations

import threading


class CancellationToken:
    """Thread-safe cancellation token.

    Examples:
        >>> token = CancellationToken()
        >>> # From a shutdown handler or watchdog thread
        >>> token.cancel()
        >>> token.is_cancelled()
        True
    """

    def __init__(self) -> None:
        self._is_cancelled = threading.Event()

    def cancel(self) -> None:
        """Signal that cancellation has been requested."""
        self._is_cancelled.set()

    def is_cancelled(self) -> bool:
        return self._is_cancelled.is_set()

    def wait(self, seconds: float) -> bool:
        """Block for up to ``seconds``.

        Returns:
            True if the token was cancelled before or during the wait,
            False if the full duration elapsed.
        """
        return self._is_cancelled.wait(max(0.0, seconds))
