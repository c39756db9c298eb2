"""Shared fixtures for the travel catalog tests."""

from __future__ import annotations

import pytest

from travel_catalog.config import reset_config
from travel_catalog.container import reset_container
from travel_catalog.pipeline import reset_defaults


@pytest.fixture(autouse=True)
def fresh_state():
    """Start every test with fresh configuration and default services."""
    reset_config()
    reset_defaults()
    reset_container()
    yield
    reset_config()
    reset_defaults()
    reset_container()


@pytest.fixture
def raw_packages():
    """A small backend payload spanning domestic and international trips."""
    return [
        {
            "_id": "p1",
            "name": "Goa Beach Escape",
            "destination": "Goa, India",
            "duration": 4,
            "price": 18000,
            "rating": 4.5,
            "numReviews": 20,
            "highlights": ["Beach hopping"],
            "images": [{"url": "goa-1.jpg"}],
            "description": "Sun and sand",
            "category": "beach",
            "isFeatured": True,
            "status": "published",
        },
        {
            "_id": "p2",
            "name": "Paris Museums",
            "destination": "Paris, France",
            "duration": 6,
            "price": 120000,
            "rating": 4.8,
            "numReviews": 5,
            "highlights": ["Louvre museum"],
            "images": [{"url": "paris.jpg"}],
            "description": "Art and history",
            "category": "city",
            "status": "published",
        },
        {
            "_id": "p3",
            "name": "Lyon Food Trail",
            "destination": "Lyon, France",
            "duration": 3,
            "price": 90000,
            "rating": 4.0,
            "numReviews": 8,
            "highlights": ["Cuisine tasting"],
            "description": "Bouchons",
            "category": "food",
            "status": "published",
        },
        {
            "_id": "p4",
            "name": "Bali Honeymoon",
            "destination": "Bali, Indonesia",
            "duration": 5,
            "price": 70000,
            "rating": 4.6,
            "numReviews": 40,
            "highlights": ["Honeymoon dinner"],
            "description": "Private pool",
            "category": "honeymoon",
            "isFeatured": True,
            "status": "published",
        },
        {
            "_id": "p5",
            "name": "Goa Draft",
            "destination": "Goa, India",
            "duration": 2,
            "price": 9000,
            "status": "draft",
        },
    ]
