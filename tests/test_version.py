"""Tests for the scanbench version information."""

from datetime import datetime

from scanbench.version.scanbench_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert "1.2.3" in v.full_version()
    assert "abcdef12" in v.full_version()


def test_scanbench_version_instance():
    """Test the global SCANBENCH_VERSION instance."""
    from scanbench import __version__
    from scanbench.version import SCANBENCH_VERSION

    assert isinstance(SCANBENCH_VERSION, Version)
    assert __version__ == str(SCANBENCH_VERSION)
    assert len(SCANBENCH_VERSION.hash) == 64
