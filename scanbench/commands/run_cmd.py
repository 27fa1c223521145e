"""Run command - times compile and scan strategies for each benchmark pattern.

CLI Examples:
    scanbench run                          # All default benchmarks, re engine
    scanbench run -b Email -b IP           # Selected benchmarks
    scanbench run -n 10 -e regex           # 10 iterations on the regex engine
    scanbench run --fixture corpus.txt     # Scan a different text
    scanbench run --config bench.yaml      # Use config file
    scanbench run --keep-going             # Record rejected patterns, run the rest
    scanbench run -o results.json          # Save to JSON
    scanbench run -o a.json -o b.yaml      # Multiple outputs
"""

import sys
from pathlib import Path

import click

from scanbench.config import ConfigError, load_config
from scanbench.engines import EngineNotFoundError, PatternError, get_engine
from scanbench.fixtures import DEFAULT_FIXTURE_TEXT, FixtureLoader
from scanbench.harness import InconsistencyError
from scanbench.models.bench_models import ScanBenchmarkResult, SuiteConfig
from scanbench.patterns import DEFAULT_PATTERNS, PatternNotFoundError, get_pattern
from scanbench.results import OutputFormat
from scanbench.suite import run_suite
from scanbench.utils.env import EnvVarTypeError


def get_output_format(output: str | None, fmt: str | None) -> OutputFormat:
    """Determine output format from explicit format or filename."""
    if fmt:
        return OutputFormat(fmt.lower())
    if output:
        return OutputFormat.from_path(output)
    return OutputFormat.TEXT


def select_benchmarks(config: SuiteConfig, names: tuple[str, ...]) -> SuiteConfig:
    """Restrict the configuration to the named benchmarks, in the given order.

    Raises:
        PatternNotFoundError: If a name is not in the configured table.
    """
    if not names:
        return config

    table = config.benchmarks if config.benchmarks is not None else DEFAULT_PATTERNS
    selected = []
    for name in names:
        spec = get_pattern(name, table)
        if spec not in selected:
            selected.append(spec)
    return config.model_copy(update={"benchmarks": selected})


def run_bench(
    benchmarks: tuple[str, ...],
    iterations: int | None,
    engine_name: str | None,
    fixture: str | None,
    config: str | None,
    outputs: tuple[str, ...],
    fmt: str | None,
    quiet: bool,
    keep_going: bool = False,
) -> None:
    """Run scan benchmarks based on CLI arguments.

    With keep_going, benchmarks whose patterns the engine rejects are
    reported as errors in the results and the command exits 1 afterwards.
    """
    try:
        suite_config = load_config(
            config,
            overrides={
                "iterations": iterations,
                "engine": engine_name,
                "fixture": fixture,
            },
        )
        suite_config = select_benchmarks(suite_config, benchmarks)
        engine = get_engine(suite_config.engine)
    except (ConfigError, EngineNotFoundError, PatternNotFoundError, EnvVarTypeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    loader = FixtureLoader(
        suite_config.fixture, suite_config.default_text or DEFAULT_FIXTURE_TEXT
    )
    text = loader.load()

    stdout_format = get_output_format(None, fmt)
    if stdout_format == OutputFormat.TEXT:
        click.echo(f"String scan bench for {engine.description()}")

    def show_progress(_iteration: int) -> None:
        if not quiet:
            click.echo(".", nl=False, err=True)

    def finish_progress(result: ScanBenchmarkResult) -> None:
        if not quiet:
            click.echo(f" {result.name}", err=True)

    try:
        results = run_suite(
            suite_config,
            engine,
            text,
            on_iteration=show_progress,
            on_result=finish_progress,
            stop_on_error=not keep_going,
        )
    except (PatternError, InconsistencyError) as e:
        if not quiet:
            click.echo(err=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for out_path in outputs:
        results.emit(out_path, get_output_format(out_path, None))
        click.echo(f"Results saved to: {Path(out_path)}", err=True)

    if not outputs or fmt:
        results.emit(sys.stdout, stdout_format)

    if results.errors:
        sys.exit(1)
