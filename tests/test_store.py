from datetime import date
import pytest
from pydantic import ValidationError

from case_inventory.exceptions import ItemNotFoundError, MissingModelError
from case_inventory.sample_data import SAMPLE_ITEMS
from case_inventory.schemas import MAX_QUANTITY
from case_inventory.store import CatalogStore
from conftest import make_item


class TestPersistenceContract:
    def test_insert_many_assigns_ids(self, store):
        ids = store.insert_many([make_item(model="A"), make_item(model="B")])
        assert ids == [1, 2]
        assert [item.id for item in store.list_all()] == [1, 2]

    def test_insert_fills_missing_entry_date(self, store):
        store.insert_many([make_item(entry_date="")])
        assert store.list_all()[0].entry_date == date.today().isoformat()

    def test_data_survives_reopen(self, store):
        store.insert_many([make_item(model="Moto G84", unit_price=19.9, quantity=4)])
        store.record_import_batch("capas.xlsx", 1)

        reopened = CatalogStore(store.path)
        assert reopened.list_all()[0].model == "Moto G84"
        assert reopened.list_all()[0].unit_price == 19.9
        assert reopened.list_import_batches()[0].file_name == "capas.xlsx"
        assert reopened.insert_many([make_item()]) == [2]

    def test_import_history_newest_first(self, store):
        store.record_import_batch("first.csv", 3)
        store.record_import_batch("second.xlsx", 5)
        batches = store.list_import_batches()
        assert [b.file_name for b in batches] == ["second.xlsx", "first.csv"]
        assert batches[0].record_count == 5

    def test_import_batch_is_immutable(self, store):
        batch = store.record_import_batch("capas.csv", 2)
        with pytest.raises(ValidationError):
            batch.record_count = 10


class TestCatalogEntries:
    def test_add_requires_model(self, store):
        with pytest.raises(MissingModelError):
            store.add_item(make_item(model="   "))
        assert store.list_all() == []

    def test_get_update_delete(self, store):
        item_id = store.add_item(make_item(model="Poco X6", quantity=1))

        updated = store.update(item_id, {"quantity": 8})
        assert updated.quantity == 8
        assert store.get(item_id).quantity == 8

        store.delete(item_id)
        with pytest.raises(ItemNotFoundError):
            store.get(item_id)

    def test_update_rejects_negative_quantity(self, store):
        item_id = store.add_item(make_item())
        with pytest.raises(ValidationError):
            store.update(item_id, {"quantity": -1})

    def test_update_rejects_quantity_above_cap(self, store):
        item_id = store.add_item(make_item())
        with pytest.raises(ValidationError):
            store.update(item_id, {"quantity": MAX_QUANTITY + 1})

    def test_update_rejects_empty_model(self, store):
        item_id = store.add_item(make_item())
        with pytest.raises(MissingModelError):
            store.update(item_id, {"model": ""})

    def test_delete_unknown(self, store):
        with pytest.raises(ItemNotFoundError):
            store.delete(99)

    def test_delete_all(self, store):
        store.insert_many([make_item(), make_item()])
        store.delete_all()
        assert store.list_all() == []

    def test_search_is_case_insensitive(self, store):
        store.insert_many(
            [
                make_item(model="iPhone 15", brand="Apple", supplier="ImportCases"),
                make_item(model="Galaxy S24", brand="Samsung", supplier="ProtectMax"),
            ]
        )
        assert [i.model for i in store.search("APPLE")] == ["iPhone 15"]
        assert [i.model for i in store.search("protect")] == ["Galaxy S24"]
        assert store.search("nokia") == []


class TestSampleData:
    def test_seeds_empty_store(self, store):
        assert store.populate_sample_data() == len(SAMPLE_ITEMS)
        assert len(store.list_all()) == len(SAMPLE_ITEMS)
        assert len(store.list_import_batches()) == 1

    def test_does_not_reseed(self, store):
        store.insert_many([make_item()])
        assert store.populate_sample_data() == 1
        assert store.list_import_batches() == []
