from dataclasses import dataclass
from datetime import datetime
import hashlib
from pathlib import Path


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for scanbench.

    Includes major, minor, and patch version numbers following semver,
    plus a package hash and release date.
    """
    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return full version info including hash and date."""
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        """Return shortened hash (default 8 characters)."""
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted date string."""
        return self.date.strftime(fmt)


def _compute_package_hash() -> str:
    """
    Compute a SHA256 hash over the Python sources of the scanbench package.
    """
    package_dir = Path(__file__).resolve().parent.parent
    hasher = hashlib.sha256()

    for path in sorted(package_dir.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        try:
            hasher.update(path.read_bytes())
        except OSError:
            continue

    return hasher.hexdigest()


# Current version instance
SCANBENCH_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 19),
)
