"""Catalog service - Loads, normalizes and aggregates a page of packages.

Besides the load pipeline, the service carries the lookups, facets,
filters and sorts that listing surfaces derive from packages and their
destination aggregates. None of these mutate their inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Literal,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from ..config import CatalogConfig, get_config
from ..domain.errors import CatalogError, DestinationNotFoundError
from ..domain.models import (
    CatalogResult,
    Destination,
    DestinationType,
    Package,
)
from ..nlp.slug import slugify
from ..ports.source import PackageSourcePort
from .aggregator import DestinationAggregator
from .normalizer import PackageNormalizer

DestinationSort = Literal["popularity", "price-low", "price-high", "name"]
PackageSort = Literal["popularity", "price-low", "price-high", "duration"]


@dataclass(frozen=True, slots=True)
class NumericRange:
    """Inclusive range; ``maximum=None`` means unbounded."""

    minimum: float = 0.0
    maximum: Optional[float] = None

    def contains(self, value: float) -> bool:
        if value < self.minimum:
            return False
        return self.maximum is None or value <= self.maximum


@dataclass(frozen=True, slots=True)
class DestinationFilter:
    """Criteria for narrowing a list of destinations.

    Empty criteria match everything.
    """

    query: str = ""
    type: Optional[DestinationType] = None
    regions: frozenset[str] = field(default_factory=frozenset)
    countries: frozenset[str] = field(default_factory=frozenset)
    activities: frozenset[str] = field(default_factory=frozenset)
    price: Optional[NumericRange] = None
    min_rating: float = 0.0


@dataclass(frozen=True, slots=True)
class PackageFilter:
    """Criteria for narrowing a list of packages."""

    activities: frozenset[str] = field(default_factory=frozenset)
    price: Optional[NumericRange] = None
    duration: Optional[NumericRange] = None
    min_rating: float = 0.0
    category: Optional[str] = None


@dataclass
class CatalogService:
    """Builds catalog views from a package source.

    Attributes:
        source: Where raw records come from (optional for ``build``)
        normalizer: Raw record -> Package mapping
        aggregator: Package list -> Destination list fold
        config: Catalog configuration (default limit and status)
    """

    source: Optional[PackageSourcePort] = None
    normalizer: PackageNormalizer = field(default_factory=PackageNormalizer)
    aggregator: DestinationAggregator = field(default_factory=DestinationAggregator)
    config: CatalogConfig = field(default_factory=lambda: get_config().catalog)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def build(
        self,
        records: Iterable[Any],
        pagination: Optional[Mapping[str, Any]] = None,
    ) -> CatalogResult:
        """Normalize raw records and aggregate them into destinations.

        Records that are not mappings are skipped with a warning.
        """
        packages: List[Package] = []
        skipped = 0
        for record in records:
            if not isinstance(record, Mapping):
                skipped += 1
                continue
            packages.append(self.normalizer.normalize(record))

        if skipped:
            self._logger.warning(
                "Skipped non-object package records",
                extra={"skipped": skipped},
            )

        destinations = self.aggregator.aggregate(packages)
        self._logger.info(
            "Catalog built",
            extra={"packages": len(packages), "destinations": len(destinations)},
        )
        return CatalogResult(
            packages=tuple(packages),
            destinations=tuple(destinations),
            pagination=pagination,
        )

    def load(
        self,
        limit: Optional[int] = None,
        status: Optional[str] = None,
        **params: Any,
    ) -> CatalogResult:
        """Fetch one page from the source and build the catalog from it.

        Args:
            limit: Page size; defaults to ``config.default_limit``.
            status: Status filter; defaults to ``config.default_status``.
                An empty string disables status filtering.
            **params: Passed through to the source.

        Raises:
            CatalogError: If no source is configured.
            PackageSourceError: If the source fails.
        """
        if self.source is None:
            raise CatalogError("No package source configured")

        if limit is None:
            limit = self.config.default_limit
        if status is None:
            status = self.config.default_status
        self._logger.info(
            "Loading packages",
            extra={"limit": limit, "status": status},
        )

        page = self.source.fetch(limit, status, **params)
        return self.build(page.records, page.pagination)

    def load_safe(
        self,
        limit: Optional[int] = None,
        status: Optional[str] = None,
        **params: Any,
    ) -> Tuple[Optional[CatalogResult], Optional[str]]:
        """Load the catalog, returning an error message instead of raising."""
        try:
            return self.load(limit, status, **params), None
        except CatalogError as e:
            self._logger.warning("Catalog load failed", extra={"error": str(e)})
            return None, f"Error: {e}"

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @staticmethod
    def find_destination(
        destinations: Sequence[Destination], param: str
    ) -> Optional[Destination]:
        """Find a destination by slug, id, name slug or country slug.

        ``param`` is compared both as given and in slugified form.
        """
        if not param:
            return None
        candidates = {param, slugify(param)} - {""}
        for destination in destinations:
            for value in (
                destination.slug,
                destination.id,
                destination.name_slug,
                destination.country_slug,
            ):
                if value and value in candidates:
                    return destination
        return None

    def get_destination(
        self, destinations: Sequence[Destination], param: str
    ) -> Destination:
        """Like find_destination, but raises when nothing matches.

        Raises:
            DestinationNotFoundError: If no destination matches ``param``.
        """
        destination = self.find_destination(destinations, param)
        if destination is None:
            raise DestinationNotFoundError(
                f"Destination not found: {param}",
                param=param,
            )
        return destination

    @staticmethod
    def packages_for_destination(
        packages: Sequence[Package],
        destination: Optional[Destination],
        category: Optional[str] = None,
    ) -> List[Package]:
        """Packages that belong to ``destination``, optionally by category."""
        selected = list(packages)
        if destination is not None:
            selected = [
                p
                for p in selected
                if p.destination.key == destination.id
                or (p.destination.slug and p.destination.slug == destination.slug)
                or (
                    p.destination.name_slug
                    and p.destination.name_slug == destination.name_slug
                )
            ]
        if category:
            wanted = category.lower()
            selected = [p for p in selected if p.category.lower() == wanted]
        return selected

    @staticmethod
    def featured(packages: Sequence[Package], limit: int = 6) -> List[Package]:
        """Featured, active packages in input order."""
        return [p for p in packages if p.is_featured and p.is_active][: max(limit, 0)]

    # ------------------------------------------------------------------
    # Facets, filters and sorts
    # ------------------------------------------------------------------

    @staticmethod
    def countries_by_region(
        destinations: Sequence[Destination],
    ) -> Dict[str, List[str]]:
        """Map each region to the sorted set of its countries."""
        regions: Dict[str, set[str]] = {}
        for destination in destinations:
            countries = regions.setdefault(destination.region or "Other", set())
            if destination.country:
                countries.add(destination.country)
        return {region: sorted(countries) for region, countries in regions.items()}

    @staticmethod
    def filter_destinations(
        destinations: Sequence[Destination], criteria: DestinationFilter
    ) -> List[Destination]:
        selected = list(destinations)

        if criteria.query:
            q = criteria.query.lower()
            selected = [
                d
                for d in selected
                if q in d.name.lower()
                or q in d.country.lower()
                or q in d.description.lower()
            ]
        if criteria.type is not None:
            selected = [d for d in selected if d.type is criteria.type]
        if criteria.regions:
            selected = [d for d in selected if d.region in criteria.regions]
        if criteria.countries:
            selected = [d for d in selected if d.country in criteria.countries]
        if criteria.activities:
            selected = [d for d in selected if d.activities & criteria.activities]
        if criteria.price is not None:
            price = criteria.price
            selected = [d for d in selected if price.contains(d.min_price)]
        if criteria.min_rating > 0:
            selected = [d for d in selected if d.average_rating >= criteria.min_rating]

        return selected

    @staticmethod
    def sort_destinations(
        destinations: Sequence[Destination], order: DestinationSort = "popularity"
    ) -> List[Destination]:
        """Stable sort; unknown orders keep the input order."""
        if order == "popularity":
            return sorted(destinations, key=lambda d: d.packages_count, reverse=True)
        if order == "price-low":
            return sorted(destinations, key=lambda d: d.min_price)
        if order == "price-high":
            return sorted(destinations, key=lambda d: d.min_price, reverse=True)
        if order == "name":
            return sorted(destinations, key=lambda d: d.name.casefold())
        return list(destinations)

    @staticmethod
    def filter_packages(
        packages: Sequence[Package], criteria: PackageFilter
    ) -> List[Package]:
        selected = list(packages)

        if criteria.activities:
            selected = [p for p in selected if p.activities & criteria.activities]
        if criteria.price is not None:
            price = criteria.price
            selected = [p for p in selected if price.contains(p.price_from)]
        if criteria.duration is not None:
            duration = criteria.duration
            selected = [p for p in selected if duration.contains(p.duration_days)]
        if criteria.min_rating > 0:
            selected = [p for p in selected if p.rating >= criteria.min_rating]
        if criteria.category:
            wanted = criteria.category.lower()
            selected = [p for p in selected if p.category.lower() == wanted]

        return selected

    @staticmethod
    def sort_packages(
        packages: Sequence[Package], order: PackageSort = "popularity"
    ) -> List[Package]:
        """Stable sort; unknown orders keep the input order."""
        if order == "popularity":
            return sorted(packages, key=lambda p: p.reviews_count, reverse=True)
        if order == "price-low":
            return sorted(packages, key=lambda p: p.price_from)
        if order == "price-high":
            return sorted(packages, key=lambda p: p.price_from, reverse=True)
        if order == "duration":
            return sorted(packages, key=lambda p: p.duration_days)
        return list(packages)
