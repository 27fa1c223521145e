"""Fixture text the scan benchmarks run against."""

from scanbench.fixtures.loader import (
    BUNDLED_FIXTURE,
    DEFAULT_FIXTURE_TEXT,
    FixtureLoader,
)

__all__ = ["BUNDLED_FIXTURE", "DEFAULT_FIXTURE_TEXT", "FixtureLoader"]
