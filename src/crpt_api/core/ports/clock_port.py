from __future__ import annotations

from typing import Protocol
import time


class ClockPort(Protocol):
    def monotonic(self) -> float:
        """Return a monotonic timestamp in seconds (unaffected by wall-clock jumps)."""
        ...

    def sleep(self, seconds: float) -> None:
        """Sleep for the given seconds."""


class SystemClock:
    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)
