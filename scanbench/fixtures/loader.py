"""Fixture loading with an explicit in-memory fallback.

Usage:
    from scanbench.fixtures.loader import FixtureLoader

    loader = FixtureLoader(Path("corpus.txt"), default_text=DEFAULT_FIXTURE_TEXT)
    text = loader.load()  # file contents, or the default text if unreadable
"""

from pathlib import Path

from scanbench.utils.logger import Logger

#: Bundled fixture shipped with the package.
BUNDLED_FIXTURE = Path(__file__).parent / "data" / "sample.txt"

#: Text used when no fixture file can be read.
DEFAULT_FIXTURE_TEXT = (
    "Contact ops@example.org or jane.doe+bench@mail.example.net.\n"
    "Docs: https://scanbench.example.org/docs/index.html and "
    "http://www.example.com/mirror?version=0.1.0\n"
    "Hosts: 10.0.0.1, 192.168.1.254 and 8.8.4.4; 256.1.1.1 is not an address.\n"
)


class FixtureLoader:
    """Loads fixture text, falling back to a default when the file is unreadable."""

    def __init__(
        self,
        path: str | Path | None = None,
        default_text: str = DEFAULT_FIXTURE_TEXT,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the loader.

        Args:
            path: Fixture file. Defaults to the bundled fixture.
            default_text: Returned when the file cannot be read.
            encoding: Text encoding of the fixture file.
        """
        self.path = Path(path) if path is not None else BUNDLED_FIXTURE
        self.default_text = default_text
        self.encoding = encoding

    def load(self) -> str:
        """Return the fixture text, or the default text if reading fails."""
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            log = Logger.maybe_get("fixtures")
            if log:
                log.warning(f"Cannot read fixture {self.path} ({e}); using default text")
            return self.default_text
