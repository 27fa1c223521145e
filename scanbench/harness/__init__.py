"""Timing and verification harness.

Times algorithmically equivalent strategies side by side and fails fast
when they disagree.
"""

from scanbench.harness.errors import (
    HarnessError,
    InconsistencyError,
    NoLapsRecordedError,
)
from scanbench.harness.runner import BenchmarkRunner, Strategy, result_size
from scanbench.harness.stopwatch import Stopwatch, truncate_ms

__all__ = [
    "BenchmarkRunner",
    "HarnessError",
    "InconsistencyError",
    "NoLapsRecordedError",
    "Stopwatch",
    "Strategy",
    "result_size",
    "truncate_ms",
]
