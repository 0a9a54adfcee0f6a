"""Property model for the listing catalog."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Property:
    """A single catalog listing.

    Instances are immutable so a catalog can be read from several callers
    without locking. ``property_type`` is free text; comparisons against it
    are case-insensitive.
    """

    property_id: int
    title: str
    address: str
    price: Decimal
    property_type: str
    bedrooms: int
    bathrooms: Decimal
    sqft: int
    year_built: int
    description: str = ""
    amenities: tuple[str, ...] = field(default_factory=tuple)
    pet_friendly: bool = False
    available: bool = True

    def __str__(self) -> str:
        return (
            f"{self.title} - {format_price(self.price)} | "
            f"{self.bedrooms}BR/{format_quantity(self.bathrooms)}BA | "
            f"{self.sqft} sqft | {self.address}"
        )

    def searchable_fields(self) -> tuple[str, ...]:
        """Lower-cased text fields consulted by free-text search."""
        return (
            self.title.lower(),
            self.description.lower(),
            self.address.lower(),
            self.property_type.lower(),
            *(amenity.lower() for amenity in self.amenities),
        )


def format_price(value: Decimal) -> str:
    """Render a currency amount as ``$1,234,567`` (no decimals)."""
    return f"${value:,.0f}"


def format_quantity(value: Decimal) -> str:
    """Render a decimal without trailing zeros (``2.50`` -> ``2.5``)."""
    return format(value.normalize(), "f")
