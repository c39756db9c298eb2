"""Tests for the catalog service: loading, lookups, facets, filters and sorts."""

import pytest

from travel_catalog.adapters.source import InMemoryPackageSource
from travel_catalog.config import CatalogConfig
from travel_catalog.domain.errors import CatalogError, DestinationNotFoundError
from travel_catalog.domain.models import DestinationType
from travel_catalog.services.catalog import (
    CatalogService,
    DestinationFilter,
    NumericRange,
    PackageFilter,
)


@pytest.fixture
def service(raw_packages):
    return CatalogService(
        source=InMemoryPackageSource(raw_packages),
        config=CatalogConfig(),
    )


@pytest.fixture
def catalog(service):
    return service.load()


def _keys(destinations):
    return [d.key for d in destinations]


def _ids(packages):
    return [p.id for p in packages]


class TestLoading:
    def test_load_uses_published_status_by_default(self, catalog):
        assert _ids(catalog.packages) == ["p1", "p2", "p3", "p4"]
        assert _keys(catalog.destinations) == ["goa", "france", "indonesia"]
        assert catalog.pagination == {"page": 1, "limit": 50, "total": 4, "pages": 1}

    def test_load_with_limit(self, service):
        result = service.load(limit=2)

        assert _ids(result.packages) == ["p1", "p2"]
        assert _keys(result.destinations) == ["goa", "france"]
        assert result.pagination["pages"] == 2

    def test_load_next_page(self, service):
        result = service.load(limit=2, page=2)

        assert _ids(result.packages) == ["p3", "p4"]

    def test_load_with_status(self, service):
        result = service.load(status="draft")

        assert _ids(result.packages) == ["p5"]

    def test_explicit_zero_limit_is_passed_to_the_source(self, service):
        result = service.load(limit=0)

        assert _ids(result.packages) == ["p1"]
        assert result.pagination["limit"] == 1

    def test_empty_status_disables_filter(self, service):
        result = service.load(status="")

        assert _ids(result.packages) == ["p1", "p2", "p3", "p4", "p5"]

    def test_default_limit_from_config(self, raw_packages):
        service = CatalogService(
            source=InMemoryPackageSource(raw_packages),
            config=CatalogConfig(default_limit=1),
        )

        assert _ids(service.load().packages) == ["p1"]

    def test_build_without_source(self, raw_packages):
        result = CatalogService(config=CatalogConfig()).build(raw_packages)

        goa = result.destinations[0]
        assert goa.key == "goa"
        assert goa.packages_count == 2
        assert goa.min_price == 9000
        assert goa.duration_label == "2-4D"

    def test_build_skips_non_mapping_records(self, raw_packages):
        result = CatalogService(config=CatalogConfig()).build(
            [raw_packages[0], "junk", None]
        )

        assert _ids(result.packages) == ["p1"]

    def test_load_without_source_raises(self):
        with pytest.raises(CatalogError):
            CatalogService(config=CatalogConfig()).load()

    def test_load_safe_returns_message(self):
        result, error = CatalogService(config=CatalogConfig()).load_safe()

        assert result is None
        assert error == "Error: No package source configured"

    def test_domestic_and_international_views(self, catalog):
        assert _keys(catalog.domestic) == ["goa"]
        assert _keys(catalog.international) == ["france", "indonesia"]


class TestLookups:
    @pytest.mark.parametrize(
        "param, key",
        [
            ("goa", "goa"),
            ("Goa", "goa"),
            ("france", "france"),
            ("FRANCE", "france"),
            ("paris", "france"),
            ("indonesia", "indonesia"),
        ],
    )
    def test_find_destination(self, catalog, param, key):
        destination = CatalogService.find_destination(catalog.destinations, param)

        assert destination is not None
        assert destination.key == key

    @pytest.mark.parametrize("param", ["atlantis", "", "!!!"])
    def test_find_destination_misses(self, catalog, param):
        assert CatalogService.find_destination(catalog.destinations, param) is None

    def test_get_destination_raises(self, service, catalog):
        with pytest.raises(DestinationNotFoundError) as excinfo:
            service.get_destination(catalog.destinations, "atlantis")

        assert excinfo.value.param == "atlantis"

    def test_packages_for_destination(self, catalog):
        france = CatalogService.find_destination(catalog.destinations, "france")

        packages = CatalogService.packages_for_destination(catalog.packages, france)
        food = CatalogService.packages_for_destination(
            catalog.packages, france, category="FOOD"
        )

        assert _ids(packages) == ["p2", "p3"]
        assert _ids(food) == ["p3"]

    def test_packages_for_no_destination_filters_by_category_only(self, catalog):
        packages = CatalogService.packages_for_destination(
            catalog.packages, None, category="honeymoon"
        )

        assert _ids(packages) == ["p4"]

    def test_featured(self, catalog):
        assert _ids(CatalogService.featured(catalog.packages)) == ["p1", "p4"]
        assert _ids(CatalogService.featured(catalog.packages, limit=1)) == ["p1"]


class TestDestinationFacets:
    def test_countries_by_region(self, catalog):
        assert CatalogService.countries_by_region(catalog.destinations) == {
            "India": ["India"],
            "Europe": ["France"],
            "Asia": ["Indonesia"],
        }

    @pytest.mark.parametrize(
        "criteria, keys",
        [
            (DestinationFilter(), ["goa", "france", "indonesia"]),
            (
                DestinationFilter(type=DestinationType.INTERNATIONAL),
                ["france", "indonesia"],
            ),
            (DestinationFilter(regions=frozenset({"Europe"})), ["france"]),
            (DestinationFilter(countries=frozenset({"Indonesia"})), ["indonesia"]),
            (DestinationFilter(query="bali"), ["indonesia"]),
            (DestinationFilter(query="ART AND"), ["france"]),
            (DestinationFilter(activities=frozenset({"Food"})), ["france"]),
            (
                DestinationFilter(price=NumericRange(0, 80000)),
                ["goa", "indonesia"],
            ),
            (DestinationFilter(price=NumericRange(75000)), ["france"]),
            (DestinationFilter(min_rating=4.5), ["goa", "indonesia"]),
        ],
    )
    def test_filter_destinations(self, catalog, criteria, keys):
        filtered = CatalogService.filter_destinations(catalog.destinations, criteria)

        assert _keys(filtered) == keys

    @pytest.mark.parametrize(
        "order, keys",
        [
            ("popularity", ["france", "goa", "indonesia"]),
            ("price-low", ["goa", "indonesia", "france"]),
            ("price-high", ["france", "indonesia", "goa"]),
            ("name", ["indonesia", "goa", "france"]),
            ("unknown", ["goa", "france", "indonesia"]),
        ],
    )
    def test_sort_destinations(self, catalog, order, keys):
        ordered = CatalogService.sort_destinations(catalog.destinations, order)

        assert _keys(ordered) == keys


class TestPackageFacets:
    @pytest.mark.parametrize(
        "criteria, ids",
        [
            (PackageFilter(), ["p1", "p2", "p3", "p4"]),
            (PackageFilter(activities=frozenset({"Beach", "Romance"})), ["p1", "p4"]),
            (PackageFilter(price=NumericRange(50000)), ["p2", "p3", "p4"]),
            (PackageFilter(duration=NumericRange(4, 5)), ["p1", "p4"]),
            (PackageFilter(min_rating=4.6), ["p2", "p4"]),
            (PackageFilter(category="CITY"), ["p2"]),
        ],
    )
    def test_filter_packages(self, catalog, criteria, ids):
        filtered = CatalogService.filter_packages(catalog.packages, criteria)

        assert _ids(filtered) == ids

    @pytest.mark.parametrize(
        "order, ids",
        [
            ("popularity", ["p4", "p1", "p3", "p2"]),
            ("price-low", ["p1", "p4", "p3", "p2"]),
            ("price-high", ["p2", "p3", "p4", "p1"]),
            ("duration", ["p3", "p1", "p4", "p2"]),
        ],
    )
    def test_sort_packages(self, catalog, order, ids):
        ordered = CatalogService.sort_packages(catalog.packages, order)

        assert _ids(ordered) == ids

    def test_sorting_does_not_mutate_input(self, catalog):
        before = _ids(catalog.packages)
        CatalogService.sort_packages(catalog.packages, "price-high")

        assert _ids(catalog.packages) == before


def test_numeric_range():
    assert NumericRange(10, 20).contains(10)
    assert NumericRange(10, 20).contains(20)
    assert not NumericRange(10, 20).contains(21)
    assert NumericRange(10).contains(10**9)
    assert not NumericRange(10).contains(9)
