"""Tests for the BenchmarkRunner."""

import itertools

import pytest

from scanbench.harness.errors import InconsistencyError
from scanbench.harness.runner import BenchmarkRunner, Strategy, result_size


def test_equivalent_strategies_complete():
    """Test that matching strategies run every iteration without error."""
    text = "a1b22c333"
    runner = BenchmarkRunner(
        "Digits",
        [
            Strategy("collect", lambda: [c for c in text if c.isdigit()]),
            Strategy("count", lambda: sum(1 for c in text if c.isdigit())),
        ],
        iterations=4,
    )

    stopwatches = runner.execute()

    assert list(stopwatches) == ["collect", "count"]
    assert all(watch.laps == 4 for watch in stopwatches.values())
    assert runner.stopwatches.keys() == stopwatches.keys()


def test_divergence_fails_fast():
    """Test that a mismatch on iteration 2 of 5 stops the run."""
    calls = {"good": 0, "bad": 0}

    def good():
        calls["good"] += 1
        return 10

    def bad():
        calls["bad"] += 1
        return 9 if calls["bad"] == 2 else 10

    runner = BenchmarkRunner(
        "Broken", [Strategy("good", good), Strategy("bad", bad)], iterations=5
    )

    with pytest.raises(InconsistencyError) as exc_info:
        runner.execute()

    error = exc_info.value
    assert error.benchmark == "Broken"
    assert error.iteration == 2
    assert error.expected_label == "good"
    assert error.actual_label == "bad"
    assert (error.expected, error.actual) == (10, 9)
    assert "iteration 2" in str(error)
    assert calls == {"good": 2, "bad": 2}
    assert runner.stopwatches["bad"].laps == 2


def test_iterations_do_not_interleave():
    """Test that each iteration finishes before the next starts."""
    ticks = itertools.count()
    events = []

    def record(label):
        def operation():
            events.append((next(ticks), label))
            return 1

        return operation

    runner = BenchmarkRunner(
        "Ordering",
        [Strategy("first", record("first")), Strategy("second", record("second"))],
        iterations=3,
    )
    runner.execute()

    assert [label for _, label in events] == ["first", "second"] * 3
    stamps = [stamp for stamp, _ in events]
    assert stamps == sorted(stamps)
    for iteration in range(3):
        window = stamps[iteration * 2 : iteration * 2 + 2]
        later = stamps[iteration * 2 + 2 :]
        assert all(stamp > max(window) for stamp in later)


def test_unverified_strategy_is_timed_but_not_compared():
    """Test that verify=False excludes a result from the check."""
    runner = BenchmarkRunner(
        "Mixed",
        [
            Strategy("setup", lambda: object(), verify=False),
            Strategy("a", lambda: [1, 2, 3]),
            Strategy("b", lambda: 3),
        ],
        iterations=2,
    )

    stopwatches = runner.execute()

    assert stopwatches["setup"].laps == 2


def test_strategy_exception_propagates():
    """Test that a strategy failure propagates after its lap is recorded."""

    def explode():
        raise OSError("disk gone")

    runner = BenchmarkRunner(
        "Failing", [Strategy("ok", lambda: 1), Strategy("explode", explode)], 3
    )

    with pytest.raises(OSError, match="disk gone"):
        runner.execute()

    assert runner.stopwatches["ok"].laps == 1
    assert runner.stopwatches["explode"].laps == 1


def test_on_iteration_callback():
    """Test the progress callback receives 1-based iteration indices."""
    seen = []
    runner = BenchmarkRunner(
        "Progress", [Strategy("only", lambda: 0)], 3, on_iteration=seen.append
    )
    runner.execute()

    assert seen == [1, 2, 3]


def test_custom_measure_and_equivalence():
    """Test caller-supplied measure and equivalence functions."""
    runner = BenchmarkRunner(
        "Case",
        [Strategy("upper", lambda: "ABC"), Strategy("lower", lambda: "abc")],
        2,
        measure=lambda result: result,
        equivalent=lambda a, b: a.lower() == b.lower(),
    )
    runner.execute()

    strict = BenchmarkRunner(
        "Strict",
        [Strategy("upper", lambda: "ABC"), Strategy("lower", lambda: "abc")],
        2,
    )
    with pytest.raises(InconsistencyError):
        strict.execute()


def test_result_size():
    """Test the default comparison key."""
    assert result_size([1, 2]) == 2
    assert result_size((1,)) == 1
    assert result_size(7) == 7
    assert result_size("abc") == "abc"


def test_invalid_construction():
    """Test constructor validation."""
    with pytest.raises(ValueError, match="iterations"):
        BenchmarkRunner("Zero", [Strategy("a", lambda: 1)], 0)
    with pytest.raises(ValueError, match="strategy"):
        BenchmarkRunner("Empty", [], 1)
    with pytest.raises(ValueError, match="duplicate"):
        BenchmarkRunner("Dup", [Strategy("a", lambda: 1), Strategy("a", lambda: 1)], 1)


def test_execute_runs_once():
    """Test that a runner cannot be executed twice."""
    runner = BenchmarkRunner("Once", [Strategy("a", lambda: 1)], 1)
    runner.execute()

    with pytest.raises(RuntimeError):
        runner.execute()
