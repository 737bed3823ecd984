from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

# Largest stock count a catalog entry can hold; coercion clamps to it.
MAX_QUANTITY = 2**63 - 1


class CanonicalField(str, Enum):
    """The fixed internal attributes every spreadsheet column is mapped onto."""

    MODEL = "model"
    BRAND = "brand"
    TYPE = "type"
    COLOR = "color"
    PRICE = "price"
    QUANTITY = "quantity"
    SUPPLIER = "supplier"
    ENTRY_DATE = "entry_date"
    NOTES = "notes"


class InventoryItem(BaseModel):
    """
    Defines the data contract for a single phone-case entry in the catalog.
    Aliases are the column headers used in exported reports.
    """

    id: Optional[int] = Field(default=None, alias="ID")
    model: str = Field(default="", alias="Modelo")
    brand: str = Field(default="", alias="Marca")
    type: str = Field(default="", alias="Tipo")
    color: str = Field(default="", alias="Cor")
    unit_price: float = Field(default=0.0, ge=0, alias="Preço")
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY, alias="Quantidade")
    supplier: str = Field(default="", alias="Fornecedor")
    entry_date: str = Field(default="", alias="Data Entrada")
    notes: str = Field(default="", alias="Observações")

    class Config:
        # Build from internal names, export with the friendly aliases.
        populate_by_name = True

    @property
    def stock_value(self) -> float:
        return self.unit_price * self.quantity


class ImportBatch(BaseModel):
    """One successful spreadsheet import. Never modified after creation."""

    id: int
    file_name: str
    imported_at: datetime
    record_count: int = Field(ge=0)

    class Config:
        frozen = True


class QuantityBucket(BaseModel):
    label: str
    quantity: int = 0


class AggregateBucket(QuantityBucket):
    value: float = 0.0


class CatalogStats(BaseModel):
    total_models: int = 0
    total_units: int = 0
    total_value: float = 0.0
    by_brand: list[AggregateBucket] = Field(default_factory=list)
    by_type: list[AggregateBucket] = Field(default_factory=list)
    by_color: list[QuantityBucket] = Field(default_factory=list)
    top_items: list[InventoryItem] = Field(default_factory=list)


class DimensionSummary(BaseModel):
    label: str
    total: int = 0
    zeroed: int = 0
    below_minimum: int = 0

    @property
    def healthy(self) -> int:
        return self.total - self.zeroed - self.below_minimum


class StockReport(BaseModel):
    """Partition of a filtered catalog into zeroed / below minimum / healthy stock."""

    threshold: int
    zeroed: list[InventoryItem] = Field(default_factory=list)
    below_minimum: list[InventoryItem] = Field(default_factory=list)
    healthy: list[InventoryItem] = Field(default_factory=list)
    by_type: list[DimensionSummary] = Field(default_factory=list)
    by_color: list[DimensionSummary] = Field(default_factory=list)
    types_unique: list[str] = Field(default_factory=list)
    colors_unique: list[str] = Field(default_factory=list)
    total_filtered: int = 0
