"""Module-level entry points for consumer code.

These helpers wrap the default normalizer and aggregator so callers can
shape backend payloads without building services themselves:

    packages = [normalize_package(raw) for raw in payload["data"]]
    destinations = aggregate_destinations(packages)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import configure_logging, get_config
from .domain.errors import CatalogError
from .domain.models import Destination, Package
from .nlp.slug import slugify
from .services.aggregator import DestinationAggregator
from .services.normalizer import PackageNormalizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _default_normalizer() -> PackageNormalizer:
    return PackageNormalizer()


@lru_cache(maxsize=1)
def _default_aggregator() -> DestinationAggregator:
    return DestinationAggregator.with_policy(get_config().catalog.display_policy)


def reset_defaults() -> None:
    """Drop the cached default normalizer and aggregator."""
    _default_normalizer.cache_clear()
    _default_aggregator.cache_clear()


def normalize_package(raw: Any) -> Package:
    """Normalize one raw backend record into a Package. Never raises."""
    return _default_normalizer().normalize(raw)


def aggregate_destinations(packages: Iterable[Package]) -> List[Destination]:
    """Fold packages into destination aggregates, in first-seen key order."""
    return _default_aggregator().aggregate(packages)


def create_slug(text: Any) -> str:
    """Canonical URL-safe slug for ``text``."""
    return slugify(text)


def destination_summary(destination: Destination) -> Dict[str, Any]:
    """Plain-dict view of a destination for printing or JSON output."""
    return {
        "key": destination.id,
        "name": destination.name,
        "country": destination.country,
        "type": destination.type.value,
        "region": destination.region,
        "min_price": destination.min_price,
        "duration": destination.duration_label,
        "rating": destination.average_rating,
        "reviews": destination.review_count,
        "packages": destination.packages_count,
        "activities": sorted(destination.activities),
    }


def run_pipeline(argv: Optional[Sequence[str]] = None) -> int:
    """Aggregate a JSON export of packages and print one line per destination."""
    from .adapters.source import JsonFilePackageSource
    from .services.catalog import CatalogService

    parser = argparse.ArgumentParser(
        prog="travel_catalog",
        description="Aggregate a JSON export of travel packages into destinations.",
    )
    parser.add_argument("path", type=Path, help="JSON list or {'data': [...]} export")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Page size (default: TC_CATALOG_DEFAULT_LIMIT, 50 unless overridden)",
    )
    parser.add_argument("--page", type=int, default=1, help="Page to aggregate")
    parser.add_argument(
        "--status",
        default=None,
        help="Status filter (default: TC_CATALOG_DEFAULT_STATUS); '' disables it",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    args = parser.parse_args(argv)

    configure_logging()
    catalog = CatalogService(source=JsonFilePackageSource(args.path))

    try:
        result = catalog.load(limit=args.limit, status=args.status, page=args.page)
    except CatalogError as e:
        logger.error("Catalog load failed: %s", e)
        return 1

    pagination = result.pagination or {}
    if pagination.get("pages", 0) > 1:
        logger.warning(
            "Aggregated page %s of %s (%s packages in total); "
            "use --limit or --page to see the rest",
            pagination.get("page"),
            pagination.get("pages"),
            pagination.get("total"),
        )

    summaries = [destination_summary(d) for d in result.destinations]
    if args.json:
        print(json.dumps(summaries, indent=2, ensure_ascii=False))
    else:
        for s in summaries:
            print(
                f"{s['name']:<24} {s['type']:<13} {s['region']:<12} "
                f"from {s['min_price']:>10.0f}  {s['duration']:<8} "
                f"{s['rating']:.1f}*  ({s['packages']} packages)"
            )
    return 0


if __name__ == "__main__":
    sys.exit(run_pipeline())
