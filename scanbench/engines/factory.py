"""Engine factory for selecting a regular-expression engine by name."""

from scanbench.engines.base import Engine


class EngineNotFoundError(Exception):
    """Raised when a requested engine is unknown or unavailable."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(
            f"Engine not found: '{name}'. Valid: {', '.join(sorted(known))}"
        )


def _engine_classes() -> dict[str, type[Engine]]:
    """Return engine classes keyed by engine name."""
    from scanbench.engines.regex_engine import RegexEngine
    from scanbench.engines.stdlib_re import ReEngine

    return {cls.name: cls for cls in (ReEngine, RegexEngine)}


def get_engine(name: str) -> Engine:
    """Return an engine instance by name (case-insensitive).

    Args:
        name: Engine name, e.g. "re" or "regex".

    Returns:
        Engine: The engine instance.

    Raises:
        EngineNotFoundError: If the engine is unknown or not available.
    """
    classes = _engine_classes()
    engine_cls = classes.get(name.lower())
    if engine_cls is None:
        raise EngineNotFoundError(name, list(classes))

    engine = engine_cls()
    if not engine.is_available():
        raise EngineNotFoundError(name, available_engines())
    return engine


def available_engines() -> list[str]:
    """Return the names of engines usable on this system."""
    return [name for name, cls in _engine_classes().items() if cls().is_available()]
