"""Scan benchmarks: compile, eager scan and callback scan, timed side by side.

Usage:
    from scanbench.engines import get_engine
    from scanbench.patterns import get_pattern, resolve_pattern
    from scanbench.suite import ScanBenchmark

    engine = get_engine("re")
    resolved = resolve_pattern(get_pattern("Email"), engine)
    result = ScanBenchmark(resolved, engine, text, iterations=50).run()
    for line in result.reports:
        print(line)
"""

from collections.abc import Callable
from typing import Any

from scanbench.engines.base import Engine, PatternError
from scanbench.harness.runner import BenchmarkRunner, Strategy
from scanbench.models.bench_models import ScanBenchmarkResult, SuiteConfig
from scanbench.patterns import DEFAULT_PATTERNS, ResolvedPattern, resolve_pattern
from scanbench.results import BenchResults
from scanbench.utils.logger import Logger

COMPILE = "compile"
SCAN = "scan"
SCAN_WITH_CALLBACK = "scan with callback"


class ScanBenchmark:
    """Benchmarks one pattern on one engine against a fixed text.

    Each iteration compiles a fresh matcher (timed as "compile"), then
    scans the text with it twice: once collecting every match ("scan") and
    once counting matches through a callback over the lazy match sequence
    ("scan with callback"). The two scan counts must agree.
    """

    def __init__(
        self,
        resolved: ResolvedPattern,
        engine: Engine,
        text: str,
        iterations: int,
        on_iteration: Callable[[int], None] | None = None,
    ) -> None:
        self.resolved = resolved
        self.engine = engine
        self.text = text
        self.iterations = iterations
        self._on_iteration = on_iteration
        self._matcher: Any = None

    def _compile(self) -> Any:
        self._matcher = self.engine.compile(self.resolved.pattern)
        return self._matcher

    def _scan(self) -> list[Any]:
        return self.engine.scan(self._matcher, self.text)

    def _scan_with_callback(self) -> int:
        count = 0

        def increment(_match: Any) -> None:
            nonlocal count
            count += 1

        self.engine.iter_scan(self._matcher, self.text).each(increment)
        return count

    def strategies(self) -> list[Strategy]:
        """Strategies in execution order; compile is timed but not compared."""
        return [
            Strategy(COMPILE, self._compile, verify=False),
            Strategy(SCAN, self._scan),
            Strategy(SCAN_WITH_CALLBACK, self._scan_with_callback),
        ]

    def match_count(self) -> int:
        """Count matches once, outside any timed region."""
        return len(self.engine.scan(self.engine.compile(self.resolved.pattern), self.text))

    def run(self) -> ScanBenchmarkResult:
        """Run all iterations and return the timings.

        Raises:
            InconsistencyError: If the two scan strategies count differently.
        """
        match_count = self.match_count()
        runner = BenchmarkRunner(
            self.resolved.name,
            self.strategies(),
            self.iterations,
            on_iteration=self._on_iteration,
        )
        try:
            stopwatches = runner.execute()
        finally:
            self._matcher = None

        return ScanBenchmarkResult(
            name=self.resolved.name,
            pattern=self.resolved.pattern,
            used_fallback=self.resolved.used_fallback,
            engine=self.engine.name,
            iterations=self.iterations,
            match_count=match_count,
            timings={label: watch.summary() for label, watch in stopwatches.items()},
        )


def run_suite(
    config: SuiteConfig,
    engine: Engine,
    text: str,
    on_iteration: Callable[[int], None] | None = None,
    on_result: Callable[[ScanBenchmarkResult], None] | None = None,
    stop_on_error: bool = True,
) -> BenchResults:
    """Run every configured benchmark in order.

    Args:
        config: Suite configuration; the default pattern table is used when
            it sets no benchmarks.
        engine: Engine to benchmark.
        text: Fixture text, loaded once by the caller.
        on_iteration: Progress callback passed to every runner.
        on_result: Called with each benchmark result as soon as it completes.
        stop_on_error: If False, a benchmark whose patterns the engine
            rejects is recorded as an error and the run continues.

    Returns:
        BenchResults holding one result or error per benchmark.

    Raises:
        PatternError: If a pattern and its fallback are both rejected and
            stop_on_error is set.
        InconsistencyError: If a benchmark's scan strategies disagree.
    """
    log = Logger.maybe_get("suite")
    specs = config.benchmarks if config.benchmarks is not None else DEFAULT_PATTERNS
    results = BenchResults(engine=engine.description(), fixture_chars=len(text))

    for spec in specs:
        try:
            resolved = resolve_pattern(spec, engine)
        except PatternError as e:
            if stop_on_error:
                raise
            results.add_error(spec.name, str(e))
            if log:
                log.warning(f"Skipping {spec.name}: {e}")
            continue

        if log:
            log.info(f"Benchmarking {resolved.name} on {engine.name}: {resolved.pattern}")

        result = ScanBenchmark(
            resolved, engine, text, config.iterations, on_iteration=on_iteration
        ).run()
        results.add_result(result)
        if on_result is not None:
            on_result(result)

    return results
