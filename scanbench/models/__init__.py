"""Pydantic models for configuration and structured output."""

from scanbench.models.bench_models import (
    PatternSpec,
    ScanBenchmarkResult,
    StopwatchSummary,
    SuiteConfig,
)

__all__ = [
    "PatternSpec",
    "ScanBenchmarkResult",
    "StopwatchSummary",
    "SuiteConfig",
]
