"""Conversion between catalog JSON records and ``Property``."""

from decimal import Decimal, InvalidOperation
from typing import Any

from property_finder.models import Property

# JSON key -> Property attribute
FIELD_MAP: dict[str, str] = {
    "id": "property_id",
    "title": "title",
    "address": "address",
    "price": "price",
    "type": "property_type",
    "bedrooms": "bedrooms",
    "bathrooms": "bathrooms",
    "sqft": "sqft",
    "yearBuilt": "year_built",
    "description": "description",
    "amenities": "amenities",
    "petFriendly": "pet_friendly",
    "available": "available",
}

REQUIRED_KEYS = ("id", "title", "price", "type", "bedrooms")


def property_from_dict(data: dict[str, Any]) -> Property:
    """Build a ``Property`` from a catalog JSON object.

    Raises
    ------
    KeyError
        If a required key is missing.
    ValueError
        If a value has the wrong type.
    """
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise KeyError(f"missing keys: {', '.join(missing)}")

    amenities = data.get("amenities") or []
    if not isinstance(amenities, list):
        raise ValueError(f"amenities must be a list, got {type(amenities).__name__}")

    return Property(
        property_id=_to_int(data["id"], "id"),
        title=str(data["title"]),
        address=str(data.get("address", "")),
        price=_to_decimal(data["price"], "price"),
        property_type=str(data["type"]),
        bedrooms=_to_int(data["bedrooms"], "bedrooms"),
        bathrooms=_to_decimal(data.get("bathrooms", 0), "bathrooms"),
        sqft=_to_int(data.get("sqft", 0), "sqft"),
        year_built=_to_int(data.get("yearBuilt", 0), "yearBuilt"),
        description=str(data.get("description", "")),
        amenities=tuple(str(a) for a in amenities),
        pet_friendly=_to_bool(data.get("petFriendly", False), "petFriendly"),
        available=_to_bool(data.get("available", False), "available"),
    )


def property_to_dict(prop: Property) -> dict[str, Any]:
    """Convert a ``Property`` to a catalog JSON object."""
    result: dict[str, Any] = {}
    for key, attr in FIELD_MAP.items():
        result[key] = serialize_value(getattr(prop, attr))
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return float(value) if value != value.to_integral_value() else int(value)
    elif isinstance(value, (tuple, list)):
        return [serialize_value(v) for v in value]
    return value


def _to_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {value!r}") from exc


def _to_decimal(value: Any, key: str) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        # str() keeps 2.5 as Decimal("2.5") rather than its binary expansion
        number = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"{key} must be a number, got {value!r}") from exc
    # NaN would make every price comparison raise
    if not number.is_finite() or number < 0:
        raise ValueError(f"{key} must be a non-negative number, got {value!r}")
    return number


def _to_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value
