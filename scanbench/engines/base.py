"""Abstract base class for regular-expression engines.

Every engine exposes the same three operations so scan strategies can be
benchmarked against any of them:

- compile(pattern) -> matcher
- scan(matcher, text) -> all matches, fully materialized
- iter_scan(matcher, text) -> lazy, restartable sequence of matches
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class PatternError(Exception):
    """Raised when an engine rejects a pattern at compile time."""

    def __init__(self, engine: str, pattern: str, reason: str) -> None:
        self.engine = engine
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"{engine} rejected pattern {pattern!r}: {reason}")


class LazyScan:
    """Finite lazy sequence of matches that restarts on every iteration.

    Each call to iter() runs the scan again from the start of the text,
    so the same LazyScan can be consumed more than once.
    """

    def __init__(self, factory: Callable[[], Iterable[Any]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[Any]:
        return iter(self._factory())

    def each(self, callback: Callable[[Any], None]) -> None:
        """Invoke callback once per match, in order."""
        for match in self:
            callback(match)


class Engine(ABC):
    """Abstract base class for regular-expression engines."""

    #: Name used to select the engine (e.g., on the command line).
    name: str = ""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the engine's library can be used on this system."""
        pass

    @abstractmethod
    def description(self) -> str:
        """Human-readable engine name and version."""
        pass

    @abstractmethod
    def compile(self, pattern: str) -> Any:
        """Compile a pattern into a reusable matcher.

        Raises:
            PatternError: If the engine rejects the pattern.
        """
        pass

    @abstractmethod
    def scan(self, matcher: Any, text: str) -> list[Any]:
        """Return every match of matcher in text, in order."""
        pass

    @abstractmethod
    def iter_scan(self, matcher: Any, text: str) -> LazyScan:
        """Return a lazy, restartable sequence of matches of matcher in text."""
        pass
