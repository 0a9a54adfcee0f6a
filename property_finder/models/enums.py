"""Enumeration types for the property domain."""

from enum import Enum


class PropertyType(str, Enum):
    """Property types recognised in queries.

    Declaration order is the order queries are scanned in, so a query
    mentioning "townhouse" resolves to HOUSE.
    """

    APARTMENT = "apartment"
    CONDO = "condo"
    HOUSE = "house"
    LOFT = "loft"
    TOWNHOUSE = "townhouse"
    PENTHOUSE = "penthouse"
