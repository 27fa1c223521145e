"""
Version command - displays scanbench version information
"""

import click

from scanbench.engines import available_engines
from scanbench.version import SCANBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display scanbench version information.

    Args:
        verbose: If True, show additional details like full hash, date and engines
    """
    if verbose:
        click.echo(f"scanbench version {SCANBENCH_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {SCANBENCH_VERSION}")
        click.echo(f"  Release Date:     {SCANBENCH_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {SCANBENCH_VERSION.hash}")
        click.echo(f"  Engines:          {', '.join(available_engines())}")
    else:
        click.echo(f"scanbench {SCANBENCH_VERSION}")
