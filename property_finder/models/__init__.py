"""Domain models for property search."""

from property_finder.models.criteria import (
    ByMinBedrooms,
    ByPriceRange,
    ByType,
    FilterCriterion,
    FreeText,
    PetFriendlyOnly,
    QueryResult,
)
from property_finder.models.enums import PropertyType
from property_finder.models.property import Property, format_price

__all__ = [
    "ByMinBedrooms",
    "ByPriceRange",
    "ByType",
    "FilterCriterion",
    "FreeText",
    "PetFriendlyOnly",
    "Property",
    "PropertyType",
    "QueryResult",
    "format_price",
]
