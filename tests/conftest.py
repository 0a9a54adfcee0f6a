"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from property_finder.models import Property
from property_finder.store import CatalogStore


def make_property(property_id: int, **overrides) -> Property:
    """Build a listing with sensible defaults."""
    values = {
        "property_id": property_id,
        "title": f"Listing {property_id}",
        "address": "100 Main St, Springfield",
        "price": Decimal("500000"),
        "property_type": "house",
        "bedrooms": 2,
        "bathrooms": Decimal("1"),
        "sqft": 1200,
        "year_built": 1995,
        "description": "A place to live",
        "amenities": (),
        "pet_friendly": False,
        "available": True,
    }
    values.update(overrides)
    return Property(**values)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_properties() -> list[Property]:
    """A small mixed catalog."""
    return [
        make_property(
            1,
            title="Modern Downtown Apartment",
            address="12 Pine St, Seattle, WA",
            price=Decimal("450000"),
            property_type="apartment",
            bedrooms=2,
            bathrooms=Decimal("2"),
            description="Modern apartment with city views",
            amenities=("Gym", "Rooftop deck"),
            pet_friendly=True,
        ),
        make_property(
            2,
            title="Family House",
            address="8 Oak Ave, Bellevue, WA",
            price=Decimal("850000"),
            property_type="House",
            bedrooms=4,
            bathrooms=Decimal("2.5"),
            description="Quiet street near schools",
            amenities=("Garden", "Garage"),
        ),
        make_property(
            3,
            title="Waterfront Condo",
            address="1 Harbor Way, Seattle, WA",
            price=Decimal("620000"),
            property_type="condo",
            bedrooms=1,
            description="Bright unit on the water",
            amenities=("Pool",),
            pet_friendly=True,
        ),
        make_property(
            4,
            title="Sold Loft",
            address="77 Mill St, Tacoma, WA",
            price=Decimal("300000"),
            property_type="loft",
            bedrooms=5,
            description="Modern industrial loft",
            pet_friendly=True,
            available=False,
        ),
        make_property(
            5,
            title="Studio Loft",
            address="9 Elm St, Seattle, WA",
            price=Decimal("400000"),
            property_type="loft",
            bedrooms=0,
            description="Compact studio",
            amenities=("In-unit laundry",),
        ),
    ]


@pytest.fixture
def catalog(sample_properties: list[Property]) -> CatalogStore:
    """Catalog built from ``sample_properties``."""
    return CatalogStore(sample_properties)
