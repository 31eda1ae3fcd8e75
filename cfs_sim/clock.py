"""
Time sources used to stamp execution slices.

Scheduling decisions never depend on the clock; it only labels log entries.
``SimulatedClock`` advances instantly and is what tests use. ``WallClock``
really sleeps, like a CPU being occupied, for demos.
"""

from __future__ import annotations

import time
from typing import Protocol

NS_PER_MS = 1_000_000


class Clock(Protocol):
    unit_ns: int

    def now(self) -> int:
        """Current time in nanoseconds."""
        ...

    def advance(self, units: int) -> None:
        """Let ``units`` time units pass."""
        ...


class SimulatedClock:

    def __init__(self, start: int = 0, unit_ns: int = NS_PER_MS):
        self._now = start
        self.unit_ns = unit_ns

    def now(self) -> int:
        return self._now

    def advance(self, units: int) -> None:
        if units > 0:
            self._now += units * self.unit_ns


class WallClock:

    def __init__(self, unit_ns: int = NS_PER_MS):
        self.unit_ns = unit_ns

    def now(self) -> int:
        return time.perf_counter_ns()

    def advance(self, units: int) -> None:
        if units > 0:
            time.sleep(units * self.unit_ns / 1_000_000_000)


CLOCKS = {
    "simulated": SimulatedClock,
    "wall": WallClock,
}


def make_clock(name: str) -> Clock:
    name = name.lower()
    if name not in CLOCKS:
        raise ValueError(f"Unknown clock '{name}' (use {', '.join(CLOCKS)})")
    return CLOCKS[name]()
