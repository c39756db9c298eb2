"""Package source adapters - Implementations of the PackageSourcePort.

Available implementations:
- InMemoryPackageSource: Records held in memory
- JsonFilePackageSource: Records read from a JSON export
"""

from .json_file import JsonFilePackageSource
from .memory import InMemoryPackageSource, paginate

__all__ = ["InMemoryPackageSource", "JsonFilePackageSource", "paginate"]
