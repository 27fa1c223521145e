"""Version information for scanbench."""

from scanbench.version.scanbench_version import SCANBENCH_VERSION, Version

__all__ = ["SCANBENCH_VERSION", "Version"]
