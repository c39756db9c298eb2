"""Services layer - Application orchestration.

Available services:
- PackageNormalizer: Raw backend record -> Package
- DestinationAggregator: Packages -> per-destination aggregates
- CatalogService: Source page -> packages + destinations, plus lookups,
  facets, filters and sorts
"""

from .aggregator import (
    TIE_BREAK_POLICIES,
    DestinationAggregator,
    TieBreakPolicy,
    duration_label,
    first_non_empty,
    last_non_empty,
)
from .catalog import CatalogService, DestinationFilter, NumericRange, PackageFilter
from .normalizer import PackageNormalizer

__all__ = [
    "PackageNormalizer",
    "DestinationAggregator",
    "TieBreakPolicy",
    "TIE_BREAK_POLICIES",
    "first_non_empty",
    "last_non_empty",
    "duration_label",
    "CatalogService",
    "DestinationFilter",
    "PackageFilter",
    "NumericRange",
]
