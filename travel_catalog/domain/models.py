"""Immutable domain models for the travel catalog.

All models are frozen dataclasses with slots. They carry no behaviour
beyond small derived properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class DestinationType(Enum):
    """Classification of a destination relative to the home market."""

    DOMESTIC = "domestic"
    INTERNATIONAL = "international"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class DestinationIdentity:
    """Normalized identity of a free-text destination string.

    Attributes:
        raw: The trimmed source string
        name: First comma-delimited segment
        country: Home-country label for domestic matches, else the last segment
        type: Domestic / international / unknown
        region: Macro-region used for faceting, or the fallback sentinel
        name_slug: Slug of ``name``
        country_slug: Slug of ``country``
        slug: Preferred slug (name for domestic, country for international)
        key: Grouping identity, never empty when ``raw`` is not
    """

    raw: str = ""
    name: str = ""
    country: str = ""
    type: DestinationType = DestinationType.UNKNOWN
    region: str = ""
    name_slug: str = ""
    country_slug: str = ""
    slug: str = ""
    key: str = ""

    @property
    def is_domestic(self) -> bool:
        return self.type is DestinationType.DOMESTIC

    @property
    def is_international(self) -> bool:
        return self.type is DestinationType.INTERNATIONAL


@dataclass(frozen=True, slots=True)
class ItineraryDay:
    """A single day of a package itinerary."""

    day_number: int
    title: str
    description: str = ""


def _frozen_mapping(value: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


@dataclass(frozen=True, slots=True)
class Package:
    """Canonical, read-only projection of a backend package record.

    Any change goes through ``dataclasses.replace`` and yields a new value.
    ``raw`` keeps the source record for pass-through fields.
    """

    id: Optional[str]
    slug: str
    title: str
    description: str = ""
    destination_raw: str = ""
    destination: DestinationIdentity = field(default_factory=DestinationIdentity)
    duration_days: int = 0
    price_from: float = 0.0
    rating: float = 0.0
    reviews_count: int = 0
    bookings: int = 0
    category: str = "other"
    difficulty: Optional[str] = None
    image_url: str = ""
    images: tuple[str, ...] = field(default_factory=tuple)
    highlights: tuple[str, ...] = field(default_factory=tuple)
    inclusions: tuple[str, ...] = field(default_factory=tuple)
    exclusions: tuple[str, ...] = field(default_factory=tuple)
    activities: frozenset[str] = field(default_factory=frozenset)
    itinerary: tuple[ItineraryDay, ...] = field(default_factory=tuple)
    is_featured: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    raw: Mapping[str, Any] = field(default_factory=_frozen_mapping, compare=False)

    @property
    def name(self) -> str:
        """Alias kept for consumers that address the title as ``name``."""
        return self.title

    @property
    def duration_label(self) -> str:
        """Single-duration label such as ``5D/4N``; empty without a duration."""
        if not self.duration_days:
            return ""
        nights = max(self.duration_days - 1, 1)
        return f"{self.duration_days}D/{nights}N"


@dataclass(frozen=True, slots=True)
class Destination:
    """Per-destination aggregate folded from every package sharing a key.

    Identity fields come from the first member seen. Display fields
    (``image_url``, ``description``) depend on member order through the
    aggregator's tie-break policy.
    """

    id: str
    name: str
    country: str
    type: DestinationType
    region: str
    slug: str
    name_slug: str = ""
    country_slug: str = ""
    raw: str = ""
    packages: tuple[Package, ...] = field(default_factory=tuple)
    min_price: float = 0.0
    min_duration: int = 0
    max_duration: int = 0
    average_rating: float = 0.0
    review_count: int = 0
    packages_count: int = 0
    activities: frozenset[str] = field(default_factory=frozenset)
    image_url: str = ""
    description: str = ""
    duration_label: str = ""

    @property
    def key(self) -> str:
        return self.id

    @property
    def price(self) -> float:
        """Price floor, under the name the listing surfaces use."""
        return self.min_price

    @property
    def rating(self) -> float:
        return self.average_rating


@dataclass(frozen=True, slots=True)
class PackagePage:
    """One page of raw records handed over by a package source.

    Attributes:
        records: Raw backend records, in source order
        pagination: Pagination metadata passed through verbatim, if any
    """

    records: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)
    pagination: Optional[Mapping[str, Any]] = None

    @property
    def is_empty(self) -> bool:
        return len(self.records) == 0


@dataclass(frozen=True, slots=True)
class CatalogResult:
    """Normalized packages and their destination aggregates."""

    packages: tuple[Package, ...] = field(default_factory=tuple)
    destinations: tuple[Destination, ...] = field(default_factory=tuple)
    pagination: Optional[Mapping[str, Any]] = None

    @property
    def domestic(self) -> tuple[Destination, ...]:
        return tuple(d for d in self.destinations if d.type is DestinationType.DOMESTIC)

    @property
    def international(self) -> tuple[Destination, ...]:
        return tuple(
            d for d in self.destinations if d.type is not DestinationType.DOMESTIC
        )
