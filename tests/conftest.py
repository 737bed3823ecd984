import pytest

from case_inventory import settings
from case_inventory.schemas import InventoryItem
from case_inventory.store import CatalogStore


def make_item(**fields) -> InventoryItem:
    defaults = dict(model="Galaxy S24", brand="Samsung", type="Silicone", color="Preto")
    defaults.update(fields)
    return InventoryItem(**defaults)


@pytest.fixture
def catalog() -> list[InventoryItem]:
    return [
        make_item(model="iPhone 15", brand="Apple", type="Silicone", color="Preto", unit_price=30.0, quantity=0),
        make_item(model="iPhone 14", brand="Apple", type="Carteira", color="Marrom", unit_price=50.0, quantity=3),
        make_item(model="Galaxy S24", brand="Samsung", type="Silicone", color="Preto", unit_price=20.0, quantity=10),
        make_item(model="Moto G84", brand="", type="", color="Azul", unit_price=10.0, quantity=5),
        make_item(model="Poco X6", brand="Xiaomi", type="Rígida", color="", unit_price=15.0, quantity=12),
    ]


@pytest.fixture
def store(tmp_path) -> CatalogStore:
    return CatalogStore(tmp_path / "catalog.json")


@pytest.fixture(autouse=True)
def isolated_output(tmp_path, monkeypatch):
    """Keeps report files and webhook posts away from the project tree."""
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
