#!/usr/bin/env python3
"""Scanbench CLI - Command-line interface for Scanbench."""

import click

from scanbench.utils.env import get_env
from scanbench.utils.logger import Logger


@click.group()
def scanbench():
    """Scanbench: regular-expression compile and scan micro-benchmarks."""
    # Configure logger at startup if not already configured
    if not Logger.is_configured():
        # Default to WARNING so progress and results stay readable;
        # subcommands can adjust via set_level()
        Logger.configure(
            level=get_env("SCANBENCH_LOG_LEVEL", default="WARNING"), timestamps=True
        )


@scanbench.command()
@click.option(
    "--benchmark",
    "-b",
    "benchmarks",
    multiple=True,
    help="Run specific benchmark(s) by name (e.g., Email). Repeatable.",
)
@click.option(
    "--iterations",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Iterations per benchmark (default: 50, or SCANBENCH_ITERATIONS)",
)
@click.option(
    "--engine",
    "-e",
    "engine_name",
    default=None,
    help="Regular-expression engine: re or regex (default: re, or SCANBENCH_ENGINE)",
)
@click.option(
    "--fixture",
    type=click.Path(dir_okay=False),
    default=None,
    help="Text file to scan (default: bundled fixture, or SCANBENCH_FIXTURE)",
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML or JSON config file with iterations, engine and patterns",
)
@click.option(
    "--output",
    "-o",
    "outputs",
    multiple=True,
    help="Output file(s) - format auto-detected (.json/.yaml). Repeatable.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "yaml", "text"], case_sensitive=False),
    default=None,
    help="Stdout format when no --output specified",
)
@click.option("--quiet", "-q", is_flag=True, help="Do not print progress dots")
@click.option(
    "--keep-going",
    "-k",
    is_flag=True,
    help="Record benchmarks whose patterns the engine rejects and run the rest",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def run(
    benchmarks, iterations, engine_name, fixture, config, outputs, fmt, quiet, keep_going, verbose
):
    r"""Benchmark pattern compilation and scanning.

    \b
    Examples:
      scanbench run                        # Run all default benchmarks
      scanbench run -b Email -b IP         # Run selected benchmarks
      scanbench run -n 10 -e regex         # 10 iterations on regex
      scanbench run --fixture corpus.txt   # Scan another text
      scanbench run -o results.json        # Save to JSON
      scanbench run --config bench.yaml    # Use config file
      scanbench run -k --config bench.yaml # Record rejected patterns, run the rest
    """
    from scanbench.commands.run_cmd import run_bench

    if verbose:
        Logger.set_level("DEBUG")

    run_bench(
        benchmarks=benchmarks,
        iterations=iterations,
        engine_name=engine_name,
        fixture=fixture,
        config=config,
        outputs=outputs,
        fmt=fmt,
        quiet=quiet,
        keep_going=keep_going,
    )


@scanbench.command("list")
@click.option("--engine", "-e", "engine_name", default=None, help="Engine to resolve against")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML or JSON config file with patterns",
)
@click.option("--verbose", "-v", is_flag=True, help="Show descriptions and patterns")
def list_command(engine_name, config, verbose):
    """List benchmark patterns."""
    from scanbench.commands.list_cmd import list_patterns

    list_patterns(engine_name=engine_name, config=config, verbose=verbose)


@scanbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display scanbench version information."""
    from scanbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    scanbench()
