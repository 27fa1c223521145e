"""Runner for timing equivalent strategies side by side.

Usage:
    from scanbench.harness.runner import BenchmarkRunner, Strategy

    runner = BenchmarkRunner(
        "Email",
        [
            Strategy("scan", lambda: matcher.findall(text)),
            Strategy("scan with callback", lambda: sum(1 for _ in matcher.finditer(text))),
        ],
        iterations=50,
    )
    stopwatches = runner.execute()
    for watch in stopwatches.values():
        print(watch.report())
"""

import logging
from collections.abc import Callable, Sized
from dataclasses import dataclass
from typing import Any

from scanbench.harness.errors import InconsistencyError
from scanbench.harness.stopwatch import Stopwatch
from scanbench.utils.logger import Logger


def result_size(result: Any) -> Any:
    """Default comparison key: the size of sized results, else the result itself."""
    if isinstance(result, Sized) and not isinstance(result, str | bytes):
        return len(result)
    return result


@dataclass(frozen=True)
class Strategy:
    """A named zero-argument operation benchmarked against its peers.

    Attributes:
        label: Name used for the strategy's stopwatch and in errors.
        operation: Callable run once per iteration.
        verify: Whether the result takes part in the equivalence check.
    """

    label: str
    operation: Callable[[], Any]
    verify: bool = True


class BenchmarkRunner:
    """Runs every strategy once per iteration and checks they agree.

    Iterations run strictly in sequence and strategies run in declaration
    order within an iteration, each timed by its own Stopwatch. Once all
    strategies of an iteration have run, the comparison key of every
    verified strategy must be equivalent to the first verified strategy's
    key. The first mismatch raises InconsistencyError and stops the run.

    Example:
        >>> runner = BenchmarkRunner("All", strategies, iterations=5)
        >>> watches = runner.execute()
        >>> watches["scan"].laps
        5
    """

    def __init__(
        self,
        name: str,
        strategies: list[Strategy],
        iterations: int,
        measure: Callable[[Any], Any] = result_size,
        equivalent: Callable[[Any, Any], bool] | None = None,
        on_iteration: Callable[[int], None] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            name: Benchmark name, used in logs and errors.
            strategies: Strategies in execution order.
            iterations: Number of iterations, at least 1.
            measure: Maps a strategy result to the value that is compared.
            equivalent: Equivalence relation on measured values
                (defaults to ==).
            on_iteration: Called with the 1-based iteration index after
                each verified iteration (e.g., to print progress).
            clock: Clock handed to every stopwatch (defaults to
                time.perf_counter).

        Raises:
            ValueError: If iterations < 1, strategies is empty, or two
                strategies share a label.
        """
        if iterations < 1:
            raise ValueError(f"{name}: iterations must be >= 1, got {iterations}")
        if not strategies:
            raise ValueError(f"{name}: at least one strategy is required")

        labels = [strategy.label for strategy in strategies]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"{name}: duplicate strategy labels: {', '.join(duplicates)}")

        self.name = name
        self.iterations = iterations
        self._strategies = list(strategies)
        self._measure = measure
        self._equivalent = equivalent or (lambda a, b: a == b)
        self._on_iteration = on_iteration
        self._executed = False

        self._stopwatches: dict[str, Stopwatch] = {}
        for strategy in self._strategies:
            if clock is None:
                self._stopwatches[strategy.label] = Stopwatch(strategy.label)
            else:
                self._stopwatches[strategy.label] = Stopwatch(strategy.label, clock)

    @property
    def strategies(self) -> list[Strategy]:
        """Strategies in execution order."""
        return list(self._strategies)

    @property
    def stopwatches(self) -> dict[str, Stopwatch]:
        """Stopwatches keyed by strategy label, in execution order."""
        return dict(self._stopwatches)

    @property
    def logger(self) -> logging.Logger | None:
        """Logger for the runner, or None when logging is not configured."""
        return Logger.maybe_get("harness.runner")

    def execute(self) -> dict[str, Stopwatch]:
        """Run all iterations and return the stopwatches.

        Returns:
            Mapping of strategy label to its Stopwatch.

        Raises:
            InconsistencyError: If verified strategies disagree on an iteration.
            RuntimeError: If the runner has already been executed.
            Exception: Any exception raised by a strategy, unchanged.
        """
        if self._executed:
            raise RuntimeError(f"{self.name}: runner has already been executed")
        self._executed = True

        log = self.logger
        if log:
            labels = ", ".join(s.label for s in self._strategies)
            log.info(f"Running {self.name} for {self.iterations} iterations ({labels})")

        for iteration in range(1, self.iterations + 1):
            measured: list[tuple[str, Any]] = []
            for strategy in self._strategies:
                result = self._stopwatches[strategy.label].lap(strategy.operation)
                if strategy.verify:
                    measured.append((strategy.label, self._measure(result)))

            if log:
                log.debug(f"{self.name}: iteration {iteration} results {measured}")

            self._verify(iteration, measured)

            if self._on_iteration is not None:
                self._on_iteration(iteration)

        if log:
            log.info(f"{self.name} complete")

        return self.stopwatches

    def _verify(self, iteration: int, measured: list[tuple[str, Any]]) -> None:
        """Check every measured value against the first one."""
        if len(measured) < 2:
            return

        expected_label, expected = measured[0]
        for actual_label, actual in measured[1:]:
            if not self._equivalent(expected, actual):
                error = InconsistencyError(
                    self.name, iteration, expected_label, actual_label, expected, actual
                )
                log = self.logger
                if log:
                    log.error(str(error))
                raise error
