"""Query interpretation, filtering and result rendering."""

from property_finder.query.classifier import classify
from property_finder.query.engine import apply_criterion, interpret_and_filter
from property_finder.query.extractors import extract_bedroom_count, extract_numeric_value
from property_finder.query.formatter import format_results
from property_finder.query.service import PropertySearchService

__all__ = [
    "PropertySearchService",
    "apply_criterion",
    "classify",
    "extract_bedroom_count",
    "extract_numeric_value",
    "format_results",
    "interpret_and_filter",
]
