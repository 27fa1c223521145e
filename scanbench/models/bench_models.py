"""Models for scan benchmark configuration and results."""

from pathlib import Path

from pydantic import BaseModel, Field

# ============================================================================
# Configuration
# ============================================================================


class PatternSpec(BaseModel):
    """A named benchmark pattern with an optional engine-compatible fallback."""

    name: str = Field(..., min_length=1, description="Benchmark name (e.g., 'Email')")
    pattern: str = Field(..., description="Primary pattern to compile and scan with")
    fallback: str | None = Field(
        None,
        description=(
            "Pattern used when the engine rejects the primary pattern "
            "(e.g., '\\b' in place of '(?-u:\\b)')"
        ),
    )
    description: str | None = Field(
        None, description="Optional description of what the pattern matches"
    )


class SuiteConfig(BaseModel):
    """Root configuration for a scan benchmark run."""

    iterations: int = Field(50, ge=1, description="Iterations per benchmark")
    engine: str = Field("re", description="Regular-expression engine name")
    fixture: Path | None = Field(
        None, description="Fixture text file; the bundled fixture when unset"
    )
    default_text: str | None = Field(
        None,
        description=(
            "Text used when the fixture file cannot be read; "
            "DEFAULT_FIXTURE_TEXT when unset"
        ),
    )
    benchmarks: list[PatternSpec] | None = Field(
        None,
        min_length=1,
        description="Benchmarks to run, in order; DEFAULT_PATTERNS when unset",
    )


# ============================================================================
# Results
# ============================================================================


class StopwatchSummary(BaseModel):
    """Totals recorded by one stopwatch."""

    label: str = Field(..., description="Strategy label (e.g., 'compile')")
    laps: int = Field(..., ge=1, description="Number of timed executions")
    elapsed_seconds: float = Field(..., ge=0, description="Cumulative wall time")
    total_ms: float = Field(..., ge=0, description="Truncated total milliseconds")
    average_ms: float = Field(..., ge=0, description="Truncated milliseconds per lap")
    report: str = Field(..., description="Human-readable report line")


class ScanBenchmarkResult(BaseModel):
    """Results from benchmarking one pattern against one engine."""

    name: str = Field(..., description="Benchmark name")
    pattern: str = Field(..., description="Pattern actually compiled")
    used_fallback: bool = Field(
        False, description="Whether the fallback pattern replaced the primary one"
    )
    engine: str = Field(..., description="Engine name")
    iterations: int = Field(..., ge=1, description="Iterations run")
    match_count: int = Field(..., ge=0, description="Matches found in the fixture")
    timings: dict[str, StopwatchSummary] = Field(
        default_factory=dict, description="Stopwatch totals keyed by strategy label"
    )

    @property
    def reports(self) -> list[str]:
        """Report lines in strategy order."""
        return [summary.report for summary in self.timings.values()]
