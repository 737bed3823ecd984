"""
JSON-file backed catalog store.

Holds the catalog entries and the import history in a single document that is
rewritten atomically on every change. This is the persistence side the
ingestion and reporting pipelines talk to (list_all / insert_many /
record_import_batch); the engine itself never touches it.
"""
import logging
import os
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Optional
from pydantic import BaseModel, Field

from . import settings
from .exceptions import ItemNotFoundError, MissingModelError
from .sample_data import SAMPLE_FILE_NAME, SAMPLE_ITEMS
from .schemas import ImportBatch, InventoryItem

logger = logging.getLogger(__name__)

_SEARCH_FIELDS = ("model", "brand", "color", "type", "supplier")


class _CatalogDocument(BaseModel):
    next_item_id: int = 1
    next_import_id: int = 1
    items: list[InventoryItem] = Field(default_factory=list)
    imports: list[ImportBatch] = Field(default_factory=list)


class CatalogStore:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else settings.STORE_PATH
        self._doc = self._read()

    def _read(self) -> _CatalogDocument:
        if not self.path.exists():
            return _CatalogDocument()
        return _CatalogDocument.model_validate_json(self.path.read_text(encoding="utf-8"))

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(self._doc.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def _stamp(self, item: InventoryItem) -> InventoryItem:
        item_id = self._doc.next_item_id
        self._doc.next_item_id += 1
        return item.model_copy(
            update={
                "id": item_id,
                "entry_date": item.entry_date or date.today().isoformat(),
            }
        )

    # --- Persistence contract used by the pipelines ---

    def list_all(self) -> list[InventoryItem]:
        return list(self._doc.items)

    def insert_many(self, items: Iterable[InventoryItem]) -> list[int]:
        """Bulk insert with a single write. Returns the assigned ids."""
        stamped = [self._stamp(item) for item in items]
        self._doc.items.extend(stamped)
        self._write()
        logger.info(f"💾 Stored {len(stamped)} catalog entries in {self.path.name}.")
        return [item.id for item in stamped]

    def record_import_batch(self, file_name: str, count: int) -> ImportBatch:
        batch = ImportBatch(
            id=self._doc.next_import_id,
            file_name=file_name,
            imported_at=datetime.now(),
            record_count=count,
        )
        self._doc.next_import_id += 1
        self._doc.imports.append(batch)
        self._write()
        return batch

    def list_import_batches(self) -> list[ImportBatch]:
        """Import history, newest first."""
        return sorted(
            self._doc.imports, key=lambda batch: (batch.imported_at, batch.id), reverse=True
        )

    # --- Single-entry maintenance ---

    def add_item(self, item: InventoryItem) -> int:
        if not item.model.strip():
            raise MissingModelError()
        return self.insert_many([item])[0]

    def get(self, item_id: int) -> InventoryItem:
        for item in self._doc.items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)

    def update(self, item_id: int, changes: dict[str, Any]) -> InventoryItem:
        current = self.get(item_id)
        # Re-validate so negative prices or quantities are rejected.
        updated = InventoryItem.model_validate(
            {**current.model_dump(), **changes, "id": item_id}
        )
        if not updated.model.strip():
            raise MissingModelError()

        self._doc.items = [updated if item.id == item_id else item for item in self._doc.items]
        self._write()
        return updated

    def delete(self, item_id: int) -> None:
        self.get(item_id)
        self._doc.items = [item for item in self._doc.items if item.id != item_id]
        self._write()

    def delete_all(self) -> None:
        self._doc.items = []
        self._write()

    def search(self, query: str) -> list[InventoryItem]:
        needle = query.lower()
        return [
            item
            for item in self._doc.items
            if any(needle in getattr(item, field).lower() for field in _SEARCH_FIELDS)
        ]

    def populate_sample_data(self) -> int:
        """Seeds the demo catalog. Does nothing when entries already exist."""
        if self._doc.items:
            return len(self._doc.items)

        items = [InventoryItem(**row) for row in SAMPLE_ITEMS]
        self.insert_many(items)
        self.record_import_batch(SAMPLE_FILE_NAME, len(items))
        return len(items)
