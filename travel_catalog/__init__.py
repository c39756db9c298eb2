"""Top-level package for the travel catalog.

The package turns raw travel-package records into canonical packages
and per-destination aggregates that drive listing, filtering and
sorting surfaces:

    from travel_catalog import normalize_package, aggregate_destinations

    packages = [normalize_package(raw) for raw in records]
    destinations = aggregate_destinations(packages)
"""

from .domain.models import (
    CatalogResult,
    Destination,
    DestinationIdentity,
    DestinationType,
    ItineraryDay,
    Package,
)
from .nlp.activities import extract_activities
from .nlp.destination import classify_destination
from .pipeline import aggregate_destinations, create_slug, normalize_package

__all__ = [
    "normalize_package",
    "aggregate_destinations",
    "create_slug",
    "classify_destination",
    "extract_activities",
    "Package",
    "Destination",
    "DestinationIdentity",
    "DestinationType",
    "ItineraryDay",
    "CatalogResult",
]
