from __future__ import annotations

import time
from typing import Callable

# Any zero-argument callable returning unix seconds.
Clock = Callable[[], float]


def system_clock() -> float:
    return time.time()


class FixedClock:
    """Clock frozen at one instant, for reproducible codes."""

    def __init__(self, instant: float):
        self.instant = instant

    def __call__(self) -> float:
        return self.instant

    def __repr__(self) -> str:
        return f"FixedClock({self.instant!r})"


def read_clock(now: float | None = None, clock: Clock | None = None) -> float:
    if now is not None:
        return now
    return (clock or system_clock)()
