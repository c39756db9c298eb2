"""Typed errors for the travel catalog.

The normalization and aggregation engine never raises on malformed
records. These errors belong to the boundaries around it: package
sources, configuration and catalog lookups.

All errors inherit from CatalogError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CatalogError(Exception):
    """Base error for the travel catalog.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class PackageSourceError(CatalogError):
    """A package source could not deliver records.

    Attributes:
        source: Name or location of the failing source
    """

    source: str = ""


@dataclass
class DestinationNotFoundError(CatalogError):
    """No aggregated destination matches the requested slug or id.

    Attributes:
        param: The lookup value that matched nothing
    """

    param: str = ""


@dataclass
class ConfigurationError(CatalogError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
