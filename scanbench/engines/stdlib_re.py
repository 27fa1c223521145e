"""Engine backed by the standard library re module."""

import re
import sys
from typing import Any

from scanbench.engines.base import Engine, LazyScan, PatternError


class ReEngine(Engine):
    """Standard library re engine.

    Rejects scoped flag groups that turn off unicode matching, such as
    ``(?-u:\\b)``.
    """

    name = "re"

    def is_available(self) -> bool:
        return True

    def description(self) -> str:
        impl = sys.implementation
        version = ".".join(str(part) for part in impl.version[:3])
        return f"re ({impl.name} {version})"

    def compile(self, pattern: str) -> re.Pattern[str]:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise PatternError(self.name, pattern, str(e)) from e

    def scan(self, matcher: re.Pattern[str], text: str) -> list[Any]:
        return matcher.findall(text)

    def iter_scan(self, matcher: re.Pattern[str], text: str) -> LazyScan:
        return LazyScan(lambda: matcher.finditer(text))
