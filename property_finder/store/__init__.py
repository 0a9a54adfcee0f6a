"""In-memory catalog store."""

from property_finder.store.catalog import CatalogStore

__all__ = ["CatalogStore"]
