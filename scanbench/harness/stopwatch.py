"""Stopwatch that accumulates wall-clock time over repeated timed runs.

Usage:
    from scanbench.harness.stopwatch import Stopwatch

    compile_watch = Stopwatch("compile")
    for _ in range(50):
        matcher = compile_watch.lap(lambda: re.compile(pattern))

    print(compile_watch.report())
    # compile: 1.52ms elapsed in 50 iterations (avg. 0.03ms / iteration)
"""

import math
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from scanbench.harness.errors import NoLapsRecordedError
from scanbench.models.bench_models import StopwatchSummary

T = TypeVar("T")


def truncate_ms(seconds: float) -> float:
    """Convert seconds to milliseconds, truncated (not rounded) to 2 decimals.

    Example:
        >>> truncate_ms(0.019999)
        19.99
    """
    return math.floor(seconds * 100000) / 100


class Stopwatch:
    """Accumulates elapsed time and lap count across timed executions.

    Every lap adds its duration and increments the lap count exactly once,
    including laps whose operation raises. There is no reset; create a new
    stopwatch instead.

    Not thread-safe. A stopwatch belongs to a single strategy.
    """

    def __init__(self, label: str, clock: Callable[[], float] = time.perf_counter):
        """Initialize an empty stopwatch.

        Args:
            label: Name shown in reports (e.g., "scan with callback").
            clock: Monotonic clock returning seconds.
        """
        self.label = label
        self._clock = clock
        self._elapsed: float = 0.0
        self._laps: int = 0

    @property
    def elapsed(self) -> float:
        """Cumulative elapsed seconds."""
        return self._elapsed

    @property
    def laps(self) -> int:
        """Number of recorded laps."""
        return self._laps

    @contextmanager
    def timing(self) -> Iterator[None]:
        """Time the enclosed block as one lap, on every exit path."""
        start = self._clock()
        try:
            yield
        finally:
            self._elapsed += self._clock() - start
            self._laps += 1

    def lap(self, operation: Callable[[], T]) -> T:
        """Run operation once as a timed lap and return its result.

        Exceptions raised by the operation propagate after the lap has
        been recorded.
        """
        with self.timing():
            return operation()

    @property
    def total_ms(self) -> float:
        """Total elapsed milliseconds, truncated to 2 decimals."""
        return truncate_ms(self._elapsed)

    @property
    def average_ms(self) -> float:
        """Average milliseconds per lap, truncated to 2 decimals.

        Raises:
            NoLapsRecordedError: If no lap has been recorded.
        """
        if self._laps == 0:
            raise NoLapsRecordedError(self.label)
        return truncate_ms(self._elapsed / self._laps)

    def report(self) -> str:
        """Return a one-line human-readable summary.

        Raises:
            NoLapsRecordedError: If no lap has been recorded.
        """
        avg = self.average_ms
        return (
            f"{self.label}: {self.total_ms}ms elapsed in {self._laps} iterations "
            f"(avg. {avg}ms / iteration)"
        )

    def summary(self) -> StopwatchSummary:
        """Return the recorded totals as a model for structured output."""
        return StopwatchSummary(
            label=self.label,
            laps=self._laps,
            elapsed_seconds=self._elapsed,
            total_ms=self.total_ms,
            average_ms=self.average_ms,
            report=self.report(),
        )

    def __repr__(self) -> str:
        return f"Stopwatch({self.label!r}, elapsed={self._elapsed}, laps={self._laps})"
