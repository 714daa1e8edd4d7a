"""
Clock - Time Sources for Seeding

TigerStyle: Time is an injected capability.
The generator never reads the wall clock directly; Rng.from_time takes a
zero-argument callable returning an integer, so tests can substitute a
ManualClock and stay deterministic.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from .constants import TIME_EPOCH_NS, TIME_NS_PER_SEC

TimeSource = Callable[[], int]


def system_time_ns() -> int:
    """Get wall-clock time in nanoseconds since the Unix epoch."""
    return time.time_ns()


@dataclass
class ManualClock:
    """Deterministic time source.

    TigerStyle:
    - Time never advances automatically
    - All advances are explicit method calls
    - Time is represented as nanoseconds since epoch

    Instances are callable, so they can be passed anywhere a TimeSource is
    expected.
    """

    _now_ns: int = field(default=TIME_EPOCH_NS)
    _reads_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        assert self._now_ns >= 0, "time cannot be negative"

    def __call__(self) -> int:
        self._reads_count += 1
        return self._now_ns

    def now_ns(self) -> int:
        """Get current time in nanoseconds since epoch."""
        return self._now_ns

    def advance_ns(self, delta_ns: int) -> int:
        """Advance time by the given nanoseconds.

        Args:
            delta_ns: Nanoseconds to advance. Must be non-negative.

        Returns:
            The new current time in nanoseconds.
        """
        assert delta_ns >= 0, f"cannot advance by negative time ({delta_ns}ns)"
        self._now_ns += delta_ns
        return self._now_ns

    def advance_secs(self, delta_secs: float) -> int:
        """Advance time by the given seconds."""
        assert delta_secs >= 0, f"cannot advance by negative time ({delta_secs}s)"
        return self.advance_ns(int(delta_secs * TIME_NS_PER_SEC))

    def set_ns(self, time_ns: int) -> None:
        """Set time to an absolute value.

        TigerStyle: Only for test setup. Cannot go backwards.
        """
        assert time_ns >= self._now_ns, \
            f"cannot set time backwards (current: {self._now_ns}, requested: {time_ns})"
        self._now_ns = time_ns

    def reads_count(self) -> int:
        """Get the number of times this clock has been read as a time source."""
        return self._reads_count
