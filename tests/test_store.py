"""Tests for CatalogStore."""

import pytest

from conftest import make_property
from property_finder.exceptions import DuplicatePropertyError, PropertyNotFoundError
from property_finder.store import CatalogStore


class TestCatalogStore:
    """Tests for CatalogStore."""

    def test_empty(self) -> None:
        store = CatalogStore()
        assert len(store) == 0
        assert store.available() == []

    def test_keeps_order(self, catalog: CatalogStore) -> None:
        assert [p.property_id for p in catalog] == [1, 2, 3, 4, 5]
        assert [p.property_id for p in catalog.all()] == [1, 2, 3, 4, 5]

    def test_accepts_generator(self) -> None:
        store = CatalogStore(make_property(i) for i in range(3))
        assert len(store) == 3

    def test_available(self, catalog: CatalogStore) -> None:
        assert [p.property_id for p in catalog.available()] == [1, 2, 3, 5]

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(DuplicatePropertyError, match="Property 1"):
            CatalogStore([make_property(1), make_property(1)])

    def test_get(self, catalog: CatalogStore) -> None:
        assert catalog.get(3).title == "Waterfront Condo"
        assert catalog.get(99) is None

    def test_get_includes_unavailable(self, catalog: CatalogStore) -> None:
        assert catalog.get(4).available is False

    def test_require(self, catalog: CatalogStore) -> None:
        assert catalog.require(2).property_id == 2
        with pytest.raises(PropertyNotFoundError, match="Property 42 not found"):
            catalog.require(42)

    def test_summary(self, catalog: CatalogStore) -> None:
        assert catalog.summary() == {
            "total": 5,
            "available": 4,
            "pet_friendly": 2,
            "type:apartment": 1,
            "type:condo": 1,
            "type:house": 1,
            "type:loft": 1,
        }

    def test_source_list_changes_do_not_leak(self) -> None:
        source = [make_property(1)]
        store = CatalogStore(source)
        source.append(make_property(2))
        assert len(store) == 1
