"""Domain layer - Core models, vocabularies and errors.

This module contains immutable domain models, the classification
vocabularies and typed errors used throughout the package.
No external dependencies.
"""

from .errors import (
    CatalogError,
    ConfigurationError,
    DestinationNotFoundError,
    PackageSourceError,
)
from .models import (
    CatalogResult,
    Destination,
    DestinationIdentity,
    DestinationType,
    ItineraryDay,
    Package,
    PackagePage,
)
from .vocabulary import (
    DEFAULT_ACTIVITY_RULES,
    DEFAULT_VOCABULARY,
    ActivityRule,
    DestinationVocabulary,
)

__all__ = [
    # Models
    "DestinationType",
    "DestinationIdentity",
    "ItineraryDay",
    "Package",
    "Destination",
    "PackagePage",
    "CatalogResult",
    # Vocabularies
    "ActivityRule",
    "DestinationVocabulary",
    "DEFAULT_ACTIVITY_RULES",
    "DEFAULT_VOCABULARY",
    # Errors
    "CatalogError",
    "PackageSourceError",
    "DestinationNotFoundError",
    "ConfigurationError",
]
