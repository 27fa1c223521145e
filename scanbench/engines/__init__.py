"""Regular-expression engines that scan strategies are benchmarked against."""

from scanbench.engines.base import Engine, LazyScan, PatternError
from scanbench.engines.factory import (
    EngineNotFoundError,
    available_engines,
    get_engine,
)

__all__ = [
    "Engine",
    "EngineNotFoundError",
    "LazyScan",
    "PatternError",
    "available_engines",
    "get_engine",
]
