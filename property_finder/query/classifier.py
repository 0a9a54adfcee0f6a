"""Decide which filter a free-text query asks for.

Rules are tried in a fixed order and the first one that produces a
criterion wins. A rule returns None to pass the query on to the next one,
which is how a price word without a usable number ends up as a bedroom,
pet or free-text search. Reordering ``RULES`` changes results: "houses
under $500,000" is a type search because the type rule comes first.
"""

from decimal import Decimal
from typing import Callable, NamedTuple

from property_finder.logging import get_logger
from property_finder.models import (
    ByMinBedrooms,
    ByPriceRange,
    ByType,
    FilterCriterion,
    FreeText,
    PetFriendlyOnly,
    PropertyType,
)
from property_finder.query.extractors import extract_bedroom_count, extract_numeric_value

logger = get_logger(__name__)

PRICE_KEYWORDS = ("price", "budget", "$", "under", "between")
BEDROOM_KEYWORDS = ("bedroom", "bed")
PET_KEYWORDS = ("pet", "dog", "cat")

_ZERO = Decimal("0")


class IntentRule(NamedTuple):
    """A named step of the classification cascade."""

    name: str
    build: Callable[[str], FilterCriterion | None]


def _type_rule(query: str) -> FilterCriterion | None:
    if not any(t.value in query for t in PropertyType):
        return None
    return ByType(_extract_property_type(query))


def _extract_property_type(query: str) -> str:
    for property_type in PropertyType:
        if property_type.value in query:
            return property_type.value
    return PropertyType.HOUSE.value


def _price_rule(query: str) -> FilterCriterion | None:
    if not any(keyword in query for keyword in PRICE_KEYWORDS):
        return None

    min_price, max_price = extract_price_range(query)
    if min_price == _ZERO and max_price == _ZERO:
        return None
    return ByPriceRange(min_price, max_price if max_price > _ZERO else None)


def extract_price_range(query: str) -> tuple[Decimal, Decimal]:
    """Return ``(min_price, max_price)`` mentioned in a lower-cased query.

    Zero means the bound was not given. "between X and Y" with X above Y
    is read as the range Y..X.
    """
    min_price = _ZERO
    max_price = _ZERO

    if "under" in query:
        # text between the first and any second "under"
        max_price = extract_numeric_value(query.split("under")[1]) or _ZERO
    elif "between" in query and "and" in query:
        start = query.index("between") + len("between")
        end = query.find("and", start)
        if end >= 0:
            min_price = extract_numeric_value(query[start:end]) or _ZERO
            max_price = extract_numeric_value(query[end + len("and"):]) or _ZERO
            if max_price > _ZERO and min_price > max_price:
                min_price, max_price = max_price, min_price
    else:
        max_price = extract_numeric_value(query) or _ZERO

    return min_price, max_price


def _bedroom_rule(query: str) -> FilterCriterion | None:
    if not any(keyword in query for keyword in BEDROOM_KEYWORDS):
        return None
    bedrooms = extract_bedroom_count(query)
    if bedrooms <= 0:
        return None
    return ByMinBedrooms(bedrooms)


def _pet_rule(query: str) -> FilterCriterion | None:
    if any(keyword in query for keyword in PET_KEYWORDS):
        return PetFriendlyOnly()
    return None


RULES: tuple[IntentRule, ...] = (
    IntentRule("type", _type_rule),
    IntentRule("price", _price_rule),
    IntentRule("bedrooms", _bedroom_rule),
    IntentRule("pet_friendly", _pet_rule),
)


def classify(raw_query: str) -> FilterCriterion:
    """Turn a raw query into exactly one filter criterion.

    Parameters
    ----------
    raw_query : str
        User text, unvalidated.

    Returns
    -------
    FilterCriterion
        The first criterion produced by ``RULES``, or ``FreeText`` over the
        original query when no rule applies.
    """
    query = raw_query.lower()
    for rule in RULES:
        criterion = rule.build(query)
        if criterion is not None:
            logger.debug("Query %r classified by %s rule: %r", raw_query, rule.name, criterion)
            return criterion

    logger.debug("Query %r falls back to free-text search", raw_query)
    return FreeText(raw_query)
