"""Monotonic duration value type."""

import time
from dataclasses import dataclass
from typing import Self

NANOSECONDS_PER_MILLISECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True, slots=True)
class Duration:
    """Elapsed time in monotonic clock nanoseconds.

    Values are plain Python integers, so sums over any number of runs are
    exact. Conversions to human units truncate.
    """

    nanoseconds: int

    def __post_init__(self) -> None:
        if self.nanoseconds < 0:
            raise ValueError(f"Duration cannot be negative: {self.nanoseconds}")

    @classmethod
    def zero(cls) -> Self:
        """No elapsed time, the start value for sums."""
        return cls(0)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Self:
        """Build a duration from whole milliseconds."""
        return cls(milliseconds * NANOSECONDS_PER_MILLISECOND)

    @classmethod
    def since(cls, start_ns: int) -> Self:
        """Measure from a `time.perf_counter_ns()` reading until now."""
        return cls(time.perf_counter_ns() - start_ns)

    @property
    def milliseconds(self) -> int:
        """Whole milliseconds, truncated."""
        return self.nanoseconds // NANOSECONDS_PER_MILLISECOND

    @property
    def seconds(self) -> int:
        """Whole seconds, truncated."""
        return self.nanoseconds // NANOSECONDS_PER_SECOND

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)

    def __floordiv__(self, count: int) -> "Duration":
        return Duration(self.nanoseconds // count)
