"""JSON catalog files (``properties.json``)."""

import json
from pathlib import Path
from typing import Iterable

from property_finder.exceptions import CatalogLoadError, DuplicatePropertyError
from property_finder.loaders.serialization import property_from_dict, property_to_dict
from property_finder.logging import get_logger
from property_finder.models import Property
from property_finder.store import CatalogStore

logger = get_logger(__name__)


def load_catalog(path: str | Path) -> CatalogStore:
    """Read a catalog file into a ``CatalogStore``.

    Parameters
    ----------
    path : str | Path
        JSON file holding an array of listing objects.

    Returns
    -------
    CatalogStore
        Listings in file order.

    Raises
    ------
    CatalogLoadError
        If the file is missing or unreadable, is not a UTF-8 JSON array,
        or holds a malformed record or duplicate ids.
    """
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"Catalog file not found: {file_path}") from exc
    except OSError as exc:
        raise CatalogLoadError(f"Catalog file {file_path} could not be read: {exc}") from exc
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError
        raise CatalogLoadError(f"Catalog file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise CatalogLoadError(f"Catalog file {file_path} must contain a JSON array")

    properties = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CatalogLoadError(f"Record {index} in {file_path} is not an object")
        try:
            properties.append(property_from_dict(record))
        except (KeyError, ValueError) as exc:
            raise CatalogLoadError(f"Record {index} in {file_path} is invalid: {exc}") from exc

    try:
        store = CatalogStore(properties)
    except DuplicatePropertyError as exc:
        raise CatalogLoadError(f"Catalog file {file_path}: {exc}") from exc

    logger.info("Loaded %d properties (%d available) from %s", len(store), len(store.available()), file_path)
    return store


def dump_catalog(properties: Iterable[Property], path: str | Path, pretty: bool = False) -> int:
    """Write listings to a catalog file and return how many were written."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    data = [property_to_dict(prop) for prop in properties]
    with open(file_path, "w", encoding="utf-8") as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)

    logger.info("Wrote %d properties to %s", len(data), file_path)
    return len(data)
