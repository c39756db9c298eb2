"""Package normalizer - Raw backend record to canonical Package.

Normalization never raises: every field has a default, and absent or
invalid numbers resolve to 0 rather than NaN or an exception.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from ..adapters.nlp import RuleBasedActivityTagger, RuleBasedDestinationClassifier
from ..domain.models import ItineraryDay, Package
from ..nlp.slug import slugify
from ..ports.classification import ActivityTaggerPort, DestinationClassifierPort

MAX_RATING = 5.0


def to_number(value: Any) -> float:
    """Coerce a loosely typed numeric field to a finite, non-negative float."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def to_int(value: Any) -> int:
    return int(to_number(value))


def first_number(raw: Mapping[str, Any], *keys: str) -> float:
    """Return the first non-zero number among ``keys``, else 0."""
    for key in keys:
        number = to_number(raw.get(key))
        if number:
            return number
    return 0.0


def text(value: Any) -> str:
    if value is None or isinstance(value, (bool, Mapping, list, tuple)):
        return ""
    return value if isinstance(value, str) else str(value)


def string_list(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def image_url(value: Any) -> str:
    """Accept either ``{"url": ...}`` objects or plain URL strings."""
    if isinstance(value, Mapping):
        return text(value.get("url"))
    return text(value)


def extract_images(images: Any, cover_image: Any) -> Tuple[str, Tuple[str, ...]]:
    """Return ``(cover, images)``; the cover falls back to the first image."""
    urls: Tuple[str, ...] = ()
    if isinstance(images, (list, tuple)):
        urls = tuple(url for url in (image_url(img) for img in images) if url)

    cover = image_url(cover_image) or (urls[0] if urls else "")
    return cover, urls


def extract_itinerary(itinerary: Any) -> Tuple[ItineraryDay, ...]:
    """Return itinerary days sorted by day number.

    Days without a day number count as day 0 and therefore come first.
    The sort is stable, so days sharing a number keep their source order.
    """
    if isinstance(itinerary, Mapping):
        itinerary = itinerary.get("days")
    if not isinstance(itinerary, (list, tuple)):
        return ()

    days: List[ItineraryDay] = []
    for day in itinerary:
        if not isinstance(day, Mapping):
            continue
        number = to_int(day.get("dayNumber"))
        days.append(
            ItineraryDay(
                day_number=number,
                title=text(day.get("title")) or (f"Day {number}" if number else "Day"),
                description=text(day.get("description")),
            )
        )

    days.sort(key=lambda d: d.day_number)
    return tuple(days)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string or epoch milliseconds; None when unparseable."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or value is None or value == "":
        return None
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        if isinstance(value, str):
            normalized = value.strip()
            if normalized.endswith("Z"):
                normalized = normalized[:-1] + "+00:00"
            return datetime.fromisoformat(normalized)
    except (ValueError, OverflowError, OSError):
        return None
    return None


def _record_id(raw: Mapping[str, Any]) -> Optional[str]:
    for key in ("_id", "id"):
        value = raw.get(key)
        if value not in (None, ""):
            return str(value)
    return None


@dataclass
class PackageNormalizer:
    """Maps raw backend records to canonical Package values.

    Attributes:
        classifier: Destination classifier used for ``Package.destination``
        tagger: Activity tagger used for ``Package.activities``
    """

    classifier: DestinationClassifierPort = field(
        default_factory=RuleBasedDestinationClassifier
    )
    tagger: ActivityTaggerPort = field(default_factory=RuleBasedActivityTagger)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def normalize(self, raw: Any) -> Package:
        """Normalize one raw package record.

        Args:
            raw: Backend record. Anything other than a mapping is treated
                as an empty record.

        Returns:
            A new immutable Package.
        """
        if not isinstance(raw, Mapping):
            self._logger.debug(
                "Non-mapping package record treated as empty",
                extra={"record_type": type(raw).__name__},
            )
            raw = {}

        name = text(raw.get("name"))
        description = text(raw.get("description"))
        destination_raw = text(raw.get("destination"))
        highlights = string_list(raw.get("highlights"))
        inclusions = string_list(raw.get("inclusions"))
        cover, images = extract_images(raw.get("images"), raw.get("coverImage"))

        package = Package(
            id=_record_id(raw),
            slug=text(raw.get("slug")) or slugify(name),
            title=name,
            description=description,
            destination_raw=destination_raw,
            destination=self.classifier.classify(destination_raw),
            duration_days=to_int(raw.get("duration")),
            price_from=to_number(raw.get("price")),
            rating=min(first_number(raw, "rating", "averageRating"), MAX_RATING),
            reviews_count=int(first_number(raw, "numReviews", "reviewCount")),
            bookings=to_int(raw.get("bookings")),
            category=text(raw.get("category")) or "other",
            difficulty=text(raw.get("difficulty")) or None,
            image_url=cover,
            images=images,
            highlights=highlights,
            inclusions=inclusions,
            exclusions=string_list(raw.get("exclusions")),
            activities=self.tagger.tag(highlights, inclusions, description),
            itinerary=extract_itinerary(raw.get("itinerary")),
            is_featured=bool(raw.get("isFeatured")),
            is_active=raw.get("isActive") is not False,
            created_at=parse_timestamp(raw.get("createdAt")),
            updated_at=parse_timestamp(raw.get("updatedAt")),
            raw=MappingProxyType(dict(raw)),
        )

        self._logger.debug(
            "Package normalized",
            extra={
                "package_id": package.id,
                "destination_key": package.destination.key,
                "activities": sorted(package.activities),
            },
        )
        return package
