"""Read-only property catalog."""

from collections import Counter
from typing import Iterable, Iterator

from property_finder.exceptions import DuplicatePropertyError, PropertyNotFoundError
from property_finder.models import Property


class CatalogStore:
    """Ordered, immutable collection of catalog listings.

    Built once from an iterable of ``Property``; insertion order is the
    order every query result is reported in.

    Parameters
    ----------
    properties : Iterable[Property]
        Listings to hold. Ids must be unique.

    Raises
    ------
    DuplicatePropertyError
        If two listings share an id.
    """

    __slots__ = ("_properties", "_by_id")

    def __init__(self, properties: Iterable[Property] = ()) -> None:
        self._properties: tuple[Property, ...] = tuple(properties)
        self._by_id: dict[int, Property] = {}
        for prop in self._properties:
            if prop.property_id in self._by_id:
                raise DuplicatePropertyError(f"Property {prop.property_id} appears more than once")
            self._by_id[prop.property_id] = prop

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def all(self) -> tuple[Property, ...]:
        """Return every listing, available or not."""
        return self._properties

    def available(self) -> list[Property]:
        """Return available listings in catalog order."""
        return [p for p in self._properties if p.available]

    def get(self, property_id: int) -> Property | None:
        """Look up a listing by id, or None."""
        return self._by_id.get(property_id)

    def require(self, property_id: int) -> Property:
        """Look up a listing by id, raising if it is unknown."""
        prop = self._by_id.get(property_id)
        if prop is None:
            raise PropertyNotFoundError(f"Property {property_id} not found")
        return prop

    def summary(self) -> dict[str, int]:
        """Return summary counts of the catalog."""
        available = self.available()
        by_type = Counter(p.property_type.lower() for p in available)
        return {
            "total": len(self._properties),
            "available": len(available),
            "pet_friendly": sum(1 for p in available if p.pet_friendly),
            **{f"type:{name}": count for name, count in sorted(by_type.items())},
        }
