"""Structured filter criteria derived from a search query."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from property_finder.models.property import Property, format_price


@dataclass(frozen=True)
class ByType:
    """Listings whose type equals ``property_type`` (case-insensitive)."""

    property_type: str

    @property
    def title(self) -> str:
        return f"Properties of type '{self.property_type}'"

    def matches(self, prop: Property) -> bool:
        return prop.property_type.lower() == self.property_type.lower()


@dataclass(frozen=True)
class ByPriceRange:
    """Listings priced within ``[min_price, max_price]``.

    ``max_price`` is None when the range has no upper limit.
    """

    min_price: Decimal = Decimal("0")
    max_price: Decimal | None = None

    @property
    def title(self) -> str:
        upper = "no limit" if self.max_price is None else format_price(self.max_price)
        return f"Properties in price range {format_price(self.min_price)} - {upper}"

    def matches(self, prop: Property) -> bool:
        if prop.price < self.min_price:
            return False
        return self.max_price is None or prop.price <= self.max_price


@dataclass(frozen=True)
class ByMinBedrooms:
    """Listings with at least ``bedrooms`` bedrooms."""

    bedrooms: int

    @property
    def title(self) -> str:
        return f"Properties with {self.bedrooms}+ bedrooms"

    def matches(self, prop: Property) -> bool:
        return prop.bedrooms >= self.bedrooms


@dataclass(frozen=True)
class PetFriendlyOnly:
    """Listings that allow pets."""

    @property
    def title(self) -> str:
        return "Pet-friendly properties"

    def matches(self, prop: Property) -> bool:
        return prop.pet_friendly


@dataclass(frozen=True)
class FreeText:
    """Listings where any query term appears in any searchable field."""

    query: str

    @property
    def title(self) -> str:
        return "Search results"

    @property
    def terms(self) -> tuple[str, ...]:
        return tuple(self.query.lower().split())

    def matches(self, prop: Property) -> bool:
        terms = self.terms
        if not terms:
            return True
        fields = prop.searchable_fields()
        return any(term in text for term in terms for text in fields)


FilterCriterion = Union[ByType, ByPriceRange, ByMinBedrooms, PetFriendlyOnly, FreeText]


@dataclass(frozen=True)
class QueryResult:
    """Matches for one query, in catalog order, before truncation."""

    criterion: FilterCriterion
    properties: tuple[Property, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.criterion.title

    @property
    def total_count(self) -> int:
        return len(self.properties)
