"""Destination aggregator - Folds packages into per-destination summaries.

Packages are folded in input order into one accumulator per destination
key. The order is observable: display fields (image, description) are
picked by a tie-break policy, and the default policy keeps the first
non-empty value seen. Reordering the input can therefore change which
package's image is shown, and the fold must not be parallelized without
preserving input order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Iterable, List, Optional, Set

from ..domain.models import Destination, DestinationType, Package

# (current, candidate) -> value to keep
TieBreakPolicy = Callable[[str, str], str]


def first_non_empty(current: str, candidate: str) -> str:
    """Keep the first non-empty value seen."""
    return current or candidate


def last_non_empty(current: str, candidate: str) -> str:
    """Keep the most recent non-empty value seen."""
    return candidate or current


TIE_BREAK_POLICIES: Dict[str, TieBreakPolicy] = {
    "first_non_empty": first_non_empty,
    "last_non_empty": last_non_empty,
}


def round_rating(value: float) -> float:
    """Round half up to one decimal, on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def duration_label(min_duration: int, max_duration: int) -> str:
    """Human-readable duration range.

    ``""`` without a duration, ``"3-5D"`` for a range, ``"5D/4N"`` for a
    single duration (at least one night).
    """
    if not min_duration:
        return ""
    if max_duration and max_duration != min_duration:
        return f"{min_duration}-{max_duration}D"
    nights = max(min_duration - 1, 1)
    return f"{min_duration}D/{nights}N"


@dataclass
class _Accumulator:
    """Mutable fold state for one destination key."""

    seed: Package
    packages: List[Package] = field(default_factory=list)
    min_price: Optional[float] = None
    min_duration: Optional[int] = None
    max_duration: int = 0
    rating_sum: float = 0.0
    review_sum: int = 0
    activities: Set[str] = field(default_factory=set)
    image_url: str = ""
    description: str = ""

    def add(self, package: Package, policy: TieBreakPolicy) -> None:
        self.packages.append(package)
        self.min_price = (
            package.price_from
            if self.min_price is None
            else min(self.min_price, package.price_from)
        )
        self.min_duration = (
            package.duration_days
            if self.min_duration is None
            else min(self.min_duration, package.duration_days)
        )
        self.max_duration = max(self.max_duration, package.duration_days)
        self.rating_sum += package.rating
        self.review_sum += package.reviews_count
        self.activities.update(package.activities)
        self.image_url = policy(self.image_url, package.image_url)
        self.description = policy(self.description, package.description)

    def finalize(self) -> Destination:
        identity = self.seed.destination
        count = len(self.packages)
        min_duration = self.min_duration or 0
        average = round_rating(self.rating_sum / count) if count else 0.0

        return Destination(
            id=identity.key,
            name=identity.name or self.seed.destination_raw,
            country=identity.country,
            type=identity.type,
            region=identity.region,
            slug=identity.slug or identity.key,
            name_slug=identity.name_slug,
            country_slug=identity.country_slug,
            raw=identity.raw,
            packages=tuple(self.packages),
            min_price=self.min_price or 0.0,
            min_duration=min_duration,
            max_duration=self.max_duration,
            average_rating=min(max(average, 0.0), 5.0),
            review_count=self.review_sum,
            packages_count=count,
            activities=frozenset(self.activities),
            image_url=self.image_url,
            description=self.description,
            duration_label=duration_label(min_duration, self.max_duration),
        )


@dataclass
class DestinationAggregator:
    """Groups packages by destination key and folds them into Destinations.

    Attributes:
        display_policy: Tie-break policy for ``image_url`` and ``description``
    """

    display_policy: TieBreakPolicy = first_non_empty
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def with_policy(cls, name: str) -> DestinationAggregator:
        """Build an aggregator from a policy name (see TIE_BREAK_POLICIES).

        Raises:
            KeyError: If the policy name is unknown.
        """
        return cls(display_policy=TIE_BREAK_POLICIES[name])

    def aggregate(self, packages: Iterable[Package]) -> List[Destination]:
        """Fold packages into destinations, in first-seen key order.

        Packages whose destination key is empty are skipped.

        Args:
            packages: Normalized packages, in the order that decides
                display fields.

        Returns:
            One Destination per distinct key. Not sorted by any business
            criterion; sorting and filtering are left to the caller.
        """
        accumulators: Dict[str, _Accumulator] = {}
        skipped = 0

        for package in packages:
            key = package.destination.key
            if not key:
                skipped += 1
                continue
            if key not in accumulators:
                accumulators[key] = _Accumulator(seed=package)
            accumulators[key].add(package, self.display_policy)

        destinations = [acc.finalize() for acc in accumulators.values()]

        self._logger.debug(
            "Destinations aggregated",
            extra={
                "destinations": len(destinations),
                "domestic": sum(
                    1 for d in destinations if d.type is DestinationType.DOMESTIC
                ),
                "skipped_packages": skipped,
            },
        )
        return destinations
