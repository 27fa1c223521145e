"""Pattern table for the scan benchmarks.

Each benchmark names a primary pattern and, where the primary relies on
engine-specific syntax, a fallback that every engine accepts. The pattern
to use is resolved once against the selected engine before any timing.

Usage:
    from scanbench.patterns import DEFAULT_PATTERNS, get_pattern, resolve_pattern

    spec = get_pattern("uri")
    resolved = resolve_pattern(spec, engine)
    print(resolved.pattern, resolved.used_fallback)
"""

from dataclasses import dataclass

from scanbench.engines.base import Engine, PatternError
from scanbench.models.bench_models import PatternSpec
from scanbench.utils.logger import Logger

_OCTET = r"(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_URI_BODY = r"https?://(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}"
_URI_TAIL = r"([-a-zA-Z0-9()@:%_\+.~#?&//=]*)"
_IP_BODY = rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}"

# (?-u:\b) is an ASCII word boundary; engines without scoped unicode flags
# use the plain \b fallback.
DEFAULT_PATTERNS: list[PatternSpec] = [
    PatternSpec(name="All", pattern=".", description="Every non-newline character"),
    PatternSpec(
        name="Email",
        pattern=r"[\w\.+-]+@[\w\.-]+\.[\w\.-]+",
        description="Email addresses",
    ),
    PatternSpec(
        name="URI",
        pattern=rf"{_URI_BODY}(?-u:\b){_URI_TAIL}",
        fallback=rf"{_URI_BODY}\b{_URI_TAIL}",
        description="http and https URLs",
    ),
    PatternSpec(
        name="IP",
        pattern=rf"(?-u:\b){_IP_BODY}(?-u:\b)",
        fallback=rf"\b{_IP_BODY}\b",
        description="Dotted-quad IPv4 addresses",
    ),
]


class PatternNotFoundError(Exception):
    """Raised when a requested benchmark pattern is not in the table."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown benchmark '{name}'. Valid: {', '.join(known)}")


@dataclass(frozen=True)
class ResolvedPattern:
    """The pattern a benchmark will actually compile on a given engine."""

    name: str
    pattern: str
    used_fallback: bool = False


def get_pattern(name: str, table: list[PatternSpec] | None = None) -> PatternSpec:
    """Look up a benchmark by name, ignoring case.

    Raises:
        PatternNotFoundError: If no benchmark has that name.
    """
    specs = DEFAULT_PATTERNS if table is None else table
    for spec in specs:
        if spec.name.lower() == name.lower():
            return spec
    raise PatternNotFoundError(name, [spec.name for spec in specs])


def resolve_pattern(spec: PatternSpec, engine: Engine) -> ResolvedPattern:
    """Pick the primary pattern, or its fallback if the engine rejects it.

    Args:
        spec: Benchmark pattern definition.
        engine: Engine the benchmark will run on.

    Returns:
        ResolvedPattern naming the pattern to benchmark.

    Raises:
        PatternError: If the primary pattern is rejected and there is no
            fallback, or the fallback is rejected as well.
    """
    try:
        engine.compile(spec.pattern)
        return ResolvedPattern(spec.name, spec.pattern)
    except PatternError as e:
        if spec.fallback is None:
            raise

        log = Logger.maybe_get("patterns")
        if log:
            log.info(f"{spec.name}: {e.reason}; using fallback pattern")

    engine.compile(spec.fallback)
    return ResolvedPattern(spec.name, spec.fallback, used_fallback=True)
