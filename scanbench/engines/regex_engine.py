"""Engine backed by the third-party regex package."""

from typing import Any

import regex

from scanbench.engines.base import Engine, LazyScan, PatternError


class RegexEngine(Engine):
    """Engine using the ``regex`` package (VERSION0 semantics, re-compatible)."""

    name = "regex"

    def is_available(self) -> bool:
        return True

    def description(self) -> str:
        return f"regex {regex.__version__}"

    def compile(self, pattern: str) -> Any:
        try:
            return regex.compile(pattern)
        except regex.error as e:
            raise PatternError(self.name, pattern, str(e)) from e

    def scan(self, matcher: Any, text: str) -> list[Any]:
        return matcher.findall(text)

    def iter_scan(self, matcher: Any, text: str) -> LazyScan:
        return LazyScan(lambda: matcher.finditer(text))
