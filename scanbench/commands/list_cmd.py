"""List command - shows the benchmark pattern table.

CLI Examples:
    scanbench list                 # Patterns resolved against the re engine
    scanbench list -e regex        # Patterns resolved against regex
    scanbench list --config b.yaml # Patterns from a config file
"""

import sys
import textwrap

import click

from scanbench.config import ConfigError, load_config
from scanbench.engines import EngineNotFoundError, PatternError, get_engine
from scanbench.patterns import DEFAULT_PATTERNS, resolve_pattern


def list_patterns(engine_name: str | None, config: str | None, verbose: bool) -> None:
    """List benchmarks and which pattern each would use on the engine."""
    try:
        suite_config = load_config(config, overrides={"engine": engine_name})
        engine = get_engine(suite_config.engine)
    except (ConfigError, EngineNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    specs = suite_config.benchmarks if suite_config.benchmarks is not None else DEFAULT_PATTERNS

    click.echo(f"Benchmarks ({engine.description()}):")
    click.echo("-" * 60)

    for spec in specs:
        try:
            resolved = resolve_pattern(spec, engine)
            status = "fallback" if resolved.used_fallback else "primary"
        except PatternError as e:
            resolved = None
            status = f"unsupported ({e.reason})"

        click.echo(f"  {spec.name:<20} {status}")
        if verbose:
            if spec.description:
                click.echo(f"      {spec.description}")
            pattern = resolved.pattern if resolved else spec.pattern
            click.echo(
                textwrap.fill(
                    pattern,
                    width=70,
                    initial_indent="      ",
                    subsequent_indent="      ",
                    break_on_hyphens=False,
                )
            )
            click.echo()

    click.echo("-" * 60)
    click.echo(f"Total: {len(specs)} benchmarks")
