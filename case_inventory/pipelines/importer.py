import logging
from pathlib import Path
from typing import Mapping, Optional

from case_inventory import settings, utils
from case_inventory.coercer import RecordCoercer
from case_inventory.column_mapper import ColumnMapper, ColumnMapping
from case_inventory.pipeline import DataPipeline
from case_inventory.schemas import CanonicalField, ImportBatch, InventoryItem
from case_inventory.store import CatalogStore

logger = logging.getLogger(__name__)


class ImportPipeline(DataPipeline):
    """
    Spreadsheet -> catalog. Headers are auto-mapped, optionally corrected with
    manual overrides, then every row is coerced into an InventoryItem.
    """

    def __init__(
        self,
        file_path: Path,
        store: CatalogStore,
        overrides: Optional[Mapping[str, Optional[CanonicalField]]] = None,
        mapper: Optional[ColumnMapper] = None,
        test_mode: bool = False,
    ):
        super().__init__("import", test_mode=test_mode)
        self.file_path = Path(file_path)
        self.store = store
        self.overrides = dict(overrides or {})
        self.mapper = mapper or ColumnMapper(settings.COLUMN_ALIASES)
        self.mapping: ColumnMapping = {}

    def extract(self) -> list[dict[str, str]]:
        logger.info(f"\n-- Reading Source: {self.file_path.name} --")
        return utils.load_spreadsheet(self.file_path)

    def transform(self, rows: list[dict[str, str]]) -> list[InventoryItem]:
        logger.info("\n--- Mapping Columns ---")
        headers = list(rows[0].keys())

        mapping = self.mapper.resolve(headers)
        for header, field in self.overrides.items():
            mapping = self.mapper.assign(mapping, header, field)
        self.mapping = mapping

        for header in headers:
            field = mapping.get(header)
            logger.info(f"  > '{header}' -> {field.value if field else '(ignored)'}")

        if CanonicalField.MODEL not in mapping.values():
            logger.warning("⚠️ No column was mapped to 'model'.")

        items = RecordCoercer().coerce_batch(rows, mapping)

        missing_model = sum(1 for item in items if not item.model)
        if missing_model:
            logger.warning(f"⚠️ {missing_model} rows have no model name.")

        logger.info(f"✅ Coerced {len(items)} rows.")
        return items

    def load(self, items: list[InventoryItem]) -> ImportBatch:
        self.store.insert_many(items)
        batch = self.store.record_import_batch(self.file_path.name, len(items))
        logger.info(f"✅ {batch.record_count} records imported from {batch.file_name}.")
        return batch
