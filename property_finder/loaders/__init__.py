"""Catalog file loading and export."""

from property_finder.loaders.json_file import dump_catalog, load_catalog
from property_finder.loaders.serialization import property_from_dict, property_to_dict

__all__ = ["dump_catalog", "load_catalog", "property_from_dict", "property_to_dict"]
