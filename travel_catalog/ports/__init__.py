"""Ports layer - Abstract interfaces (Protocols) for the catalog.

Ports define the contracts between the normalization core and the
adapters that classify text or supply raw records.
"""

from .classification import ActivityTaggerPort, DestinationClassifierPort
from .source import PackageSourcePort

__all__ = [
    # Classification
    "DestinationClassifierPort",
    "ActivityTaggerPort",
    # Sources
    "PackageSourcePort",
]
