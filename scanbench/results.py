"""Benchmark results collection and emission.

Supports multiple output formats: JSON, YAML, and text.

Usage:
    from scanbench.results import BenchResults, OutputFormat

    results = BenchResults(engine="re (cpython 3.12.1)")
    results.add_result(email_result)
    results.add_result(uri_result)

    # Emit to different formats
    results.emit("results.json", OutputFormat.JSON)
    results.emit("results.yaml", OutputFormat.YAML)
    results.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
import sys
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from scanbench.models.bench_models import ScanBenchmarkResult


class OutputFormat(Enum):
    """Supported output formats for benchmark results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout

    @classmethod
    def from_path(cls, path: str | Path) -> "OutputFormat":
        """Pick a format from a file suffix (.json, .yaml/.yml, anything else text)."""
        suffix = Path(path).suffix.lower()
        if suffix == ".json":
            return cls.JSON
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        return cls.TEXT


class BenchResults:
    """Collection of scan benchmark results with flexible emission.

    Example:
        >>> results = BenchResults(engine="re")
        >>> results.add_result(result)
        >>> results.emit(sys.stdout, OutputFormat.TEXT)
    """

    def __init__(self, engine: str | None = None, fixture_chars: int | None = None):
        """Initialize empty results collection."""
        self._results: dict[str, ScanBenchmarkResult] = {}
        self._errors: dict[str, str] = {}
        self._metadata: dict[str, Any] = {
            "timestamp_start": datetime.now(UTC).isoformat(),
            "timestamp_end": None,
            "scanbench_version": self._get_version(),
            "engine": engine,
            "fixture_chars": fixture_chars,
        }

    def _get_version(self) -> str:
        """Get scanbench version string."""
        from scanbench import __version__

        return str(__version__)

    def add_result(self, result: ScanBenchmarkResult) -> None:
        """Add a benchmark result, keyed by benchmark name."""
        self._results[result.name] = result

    def add_error(self, name: str, error: str) -> None:
        """Record an error for a benchmark that produced no result.

        Args:
            name: Benchmark name.
            error: Error message.
        """
        self._errors[name] = error

    def finalize(self) -> None:
        """Mark results as complete, setting end timestamp."""
        self._metadata["timestamp_end"] = datetime.now(UTC).isoformat()

    @property
    def results(self) -> dict[str, ScanBenchmarkResult]:
        """Get results keyed by benchmark name."""
        return self._results.copy()

    @property
    def errors(self) -> dict[str, str]:
        """Get error messages keyed by benchmark name."""
        return self._errors.copy()

    def to_dict(self) -> dict[str, Any]:
        """Convert results to a dictionary for serialization.

        Returns:
            Dictionary with metadata, results, errors, and summary.
        """
        return {
            "metadata": self._metadata,
            "results": {
                name: result.model_dump(mode="json")
                for name, result in self._results.items()
            },
            "errors": self._errors if self._errors else None,
            "summary": self._generate_summary(),
        }

    def _generate_summary(self) -> dict[str, Any]:
        """Generate a summary of results."""
        return {
            "benchmarks": len(self._results) + len(self._errors),
            "passed": len(self._results),
            "failed": len(self._errors),
            "total_matches": sum(r.match_count for r in self._results.values()),
            "fallbacks_used": [
                name for name, r in self._results.items() if r.used_fallback
            ],
        }

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit results to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        self.finalize()

        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent, default=str)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
            )
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_text(self) -> str:
        """Convert results to human-readable text.

        Each benchmark is printed as its match count followed by the
        stopwatch reports, indented.
        """
        output = StringIO()

        for name, result in self._results.items():
            output.write(f"\n{name}: {result.match_count} matches\n")
            if result.used_fallback:
                output.write(f"    (fallback pattern: {result.pattern})\n")
            output.write("\n")
            for line in result.reports:
                output.write(f"    {line}\n")

        if self._errors:
            output.write("\nErrors:\n")
            for name, error in self._errors.items():
                output.write(f"    {name}: {error}\n")

        return output.getvalue()

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        """Write content to file or stream."""
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    def __len__(self) -> int:
        """Return number of results."""
        return len(self._results)

    def __contains__(self, name: str) -> bool:
        """Check if a benchmark has results."""
        return name in self._results
