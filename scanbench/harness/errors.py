"""Exceptions raised by the timing and verification harness."""

from typing import Any


class HarnessError(Exception):
    """Base exception for harness errors."""

    pass


class InconsistencyError(HarnessError):
    """Raised when two strategies disagree on the result of one iteration."""

    def __init__(
        self,
        benchmark: str,
        iteration: int,
        expected_label: str,
        actual_label: str,
        expected: Any,
        actual: Any,
    ) -> None:
        self.benchmark = benchmark
        self.iteration = iteration
        self.expected_label = expected_label
        self.actual_label = actual_label
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{benchmark}: result mismatch on iteration {iteration}: "
            f"'{expected_label}' produced {expected!r} but "
            f"'{actual_label}' produced {actual!r}"
        )


class NoLapsRecordedError(HarnessError, ZeroDivisionError):
    """Raised when averaging a stopwatch that has not timed anything."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Stopwatch '{label}' has no recorded laps")
