"""Search facade bundling a catalog with rendering settings."""

from typing import Iterable

from property_finder.config import SearchConfig
from property_finder.logging import get_logger
from property_finder.models import Property, QueryResult
from property_finder.query.engine import interpret_and_filter
from property_finder.query.formatter import format_results
from property_finder.store import CatalogStore

logger = get_logger(__name__)


class PropertySearchService:
    """Answer free-text property queries against one catalog.

    Holds no per-query state, so one instance can serve any number of
    callers.

    Parameters
    ----------
    catalog : CatalogStore | Iterable[Property]
        Listings to search. Plain iterables are wrapped in a ``CatalogStore``.
    config : SearchConfig | None
        Rendering settings (defaults to ``SearchConfig()``).
    """

    def __init__(
        self,
        catalog: CatalogStore | Iterable[Property],
        config: SearchConfig | None = None,
    ) -> None:
        self.catalog = catalog if isinstance(catalog, CatalogStore) else CatalogStore(catalog)
        self.config = config or SearchConfig()

    def search(self, query: str) -> QueryResult:
        """Classify and filter, without rendering."""
        return interpret_and_filter(self.catalog, query)

    def process_query(self, query: str) -> str:
        """Classify, filter and render ``query`` as a text report."""
        result = self.search(query)
        logger.info(
            "Query answered",
            extra={"extra": {"query": query, "title": result.title, "matches": result.total_count}},
        )
        return format_results(
            result,
            display_limit=self.config.display_limit,
            divider_width=self.config.divider_width,
        )
