"""Tests for the pattern table and fallback resolution."""

import pytest

from scanbench.engines import PatternError
from scanbench.engines.regex_engine import RegexEngine
from scanbench.engines.stdlib_re import ReEngine
from scanbench.models import PatternSpec
from scanbench.patterns import (
    DEFAULT_PATTERNS,
    PatternNotFoundError,
    ResolvedPattern,
    get_pattern,
    resolve_pattern,
)


class RejectingEngine(ReEngine):
    """Engine that rejects any pattern containing a given marker."""

    name = "rejecting"

    def __init__(self, marker):
        self.marker = marker

    def compile(self, pattern):
        if self.marker in pattern:
            raise PatternError(self.name, pattern, f"{self.marker} unsupported")
        return super().compile(pattern)


def test_default_table():
    """Test the default benchmark names and fallbacks."""
    assert [spec.name for spec in DEFAULT_PATTERNS] == ["All", "Email", "URI", "IP"]
    assert get_pattern("All").fallback is None
    assert r"(?-u:\b)" in get_pattern("URI").pattern
    assert r"(?-u:\b)" not in get_pattern("URI").fallback
    assert get_pattern("IP").fallback.startswith(r"\b(25[0-5]")


def test_get_pattern_ignores_case():
    """Test lookup by name."""
    assert get_pattern("email").name == "Email"

    with pytest.raises(PatternNotFoundError, match="Valid: All, Email, URI, IP"):
        get_pattern("Phone")


def test_get_pattern_custom_table():
    """Test lookup in a caller-supplied table."""
    table = [PatternSpec(name="Digits", pattern=r"\d+")]

    assert get_pattern("digits", table).pattern == r"\d+"
    with pytest.raises(PatternNotFoundError):
        get_pattern("Email", table)


def test_primary_pattern_used_when_accepted():
    """Test that an accepted primary pattern is kept."""
    resolved = resolve_pattern(get_pattern("Email"), ReEngine())

    assert resolved == ResolvedPattern("Email", get_pattern("Email").pattern, False)


def test_fallback_used_when_primary_rejected():
    """Test that the fallback replaces a rejected primary pattern."""
    spec = PatternSpec(name="Word", pattern="(?x-y)word", fallback=r"\bword\b")

    resolved = resolve_pattern(spec, RejectingEngine("(?x-y)"))

    assert resolved.pattern == r"\bword\b"
    assert resolved.used_fallback


@pytest.mark.parametrize("name", ["URI", "IP"])
def test_re_engine_falls_back_for_ascii_boundaries(name):
    """Test that re resolves the (?-u:\\b) benchmarks to their fallbacks."""
    spec = get_pattern(name)

    resolved = resolve_pattern(spec, ReEngine())

    assert resolved.used_fallback
    assert resolved.pattern == spec.fallback


@pytest.mark.parametrize("name", ["URI", "IP"])
def test_regex_engine_keeps_ascii_boundaries(name):
    """Test that regex accepts the (?-u:\\b) primaries without falling back."""
    spec = get_pattern(name)

    resolved = resolve_pattern(spec, RegexEngine())

    assert not resolved.used_fallback
    assert resolved.pattern == spec.pattern


def test_rejected_without_fallback_raises():
    """Test that a rejected pattern with no fallback raises PatternError."""
    spec = PatternSpec(name="Bad", pattern="BAD")

    with pytest.raises(PatternError):
        resolve_pattern(spec, RejectingEngine("BAD"))


def test_rejected_fallback_raises():
    """Test that a rejected fallback raises PatternError."""
    spec = PatternSpec(name="Bad", pattern="BAD1", fallback="BAD2")

    with pytest.raises(PatternError) as exc_info:
        resolve_pattern(spec, RejectingEngine("BAD"))

    assert exc_info.value.pattern == "BAD2"
