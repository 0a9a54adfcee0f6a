"""Generate sample listings for demos and tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from property_finder.generators.base import BaseGenerator
from property_finder.models import Property, PropertyType

AMENITIES = (
    "Gym",
    "Pool",
    "Parking",
    "Balcony",
    "In-unit laundry",
    "Doorman",
    "Rooftop deck",
    "Fireplace",
    "Garden",
    "Garage",
    "Hardwood floors",
    "Waterfront view",
    "Central AC",
    "Storage",
)

STYLES = ("Modern", "Cozy", "Spacious", "Luxury", "Charming", "Renovated", "Downtown", "Sunny")

# (min, max) asking price in thousands by type
PRICE_BANDS: dict[PropertyType, tuple[int, int]] = {
    PropertyType.APARTMENT: (250, 900),
    PropertyType.CONDO: (300, 1100),
    PropertyType.HOUSE: (400, 1800),
    PropertyType.LOFT: (350, 1200),
    PropertyType.TOWNHOUSE: (400, 1300),
    PropertyType.PENTHOUSE: (1200, 4500),
}


class PropertyGenerator(BaseGenerator):
    """Generate synthetic catalog listings."""

    def generate(self, property_id: int) -> Property:
        """Generate a listing.

        Parameters
        ----------
        property_id : int
            Id to assign.

        Returns
        -------
        Property
            Generated listing.
        """
        property_type = self.random.choice(list(PropertyType))
        low, high = PRICE_BANDS[property_type]
        bedrooms = self.random.randint(0, 5)
        style = self.random.choice(STYLES)
        amenities = tuple(self.random.sample(AMENITIES, self.random.randint(0, 5)))

        return Property(
            property_id=property_id,
            title=f"{style} {bedrooms}BR {property_type.value.title()}",
            address=self.fake.address().replace("\n", ", "),
            price=Decimal(self.random.randint(low, high) * 1000),
            property_type=property_type.value,
            bedrooms=bedrooms,
            bathrooms=Decimal(self.random.randint(2, 8)) / 2,
            sqft=self.random.randint(450, 900) + bedrooms * self.random.randint(250, 450),
            year_built=self.random.randint(1920, 2024),
            description=self.fake.sentence(nb_words=12),
            amenities=amenities,
            pet_friendly=self.random.random() < 0.5,
            available=self.random.random() < 0.8,
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Yield ``count`` listings with ids ``1..count``."""
        for property_id in range(1, count + 1):
            yield self.generate(property_id)
