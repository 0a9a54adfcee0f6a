"""Run filter criteria against the catalog."""

from typing import Iterable

from property_finder.logging import get_logger
from property_finder.models import FilterCriterion, Property, QueryResult
from property_finder.query.classifier import classify

logger = get_logger(__name__)


def apply_criterion(catalog: Iterable[Property], criterion: FilterCriterion) -> QueryResult:
    """Return available listings matching ``criterion``, in catalog order.

    Unavailable listings are never returned, whatever the criterion.
    """
    matches = tuple(p for p in catalog if p.available and criterion.matches(p))
    logger.debug("%s: %d match(es)", criterion.title, len(matches))
    return QueryResult(criterion=criterion, properties=matches)


def interpret_and_filter(catalog: Iterable[Property], raw_query: str) -> QueryResult:
    """Classify ``raw_query`` and filter ``catalog`` with the result.

    Parameters
    ----------
    catalog : Iterable[Property]
        A ``CatalogStore`` or any ordered collection of listings.
    raw_query : str
        User text, unvalidated.

    Returns
    -------
    QueryResult
        All matches with the criterion that produced them.
    """
    return apply_criterion(catalog, classify(raw_query))
