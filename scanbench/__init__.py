"""Scanbench - regular-expression compile and scan micro-benchmarks."""

from scanbench.version.scanbench_version import SCANBENCH_VERSION, Version

__version__ = str(SCANBENCH_VERSION)
__version_info__ = SCANBENCH_VERSION

__all__ = [
    "SCANBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
