import math
import re
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from .schemas import MAX_QUANTITY, CanonicalField, InventoryItem

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")
_NON_DIGITS = re.compile(r"[^0-9]")
_LEADING_NUMBER = re.compile(r"\d*\.?\d*")


def to_price(raw: Any) -> float:
    """
    Parses a price cell such as 'R$ 1.234,56', '29,90' or '$1,234.56'.
    Anything unparseable becomes 0.
    """
    text = str(raw if raw is not None else "").strip()

    # With both separators present, the last one is the decimal mark.
    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "")
        else:
            text = text.replace(",", "")

    text = _NON_PRICE_CHARS.sub("", text.replace(",", ".", 1))
    number = _LEADING_NUMBER.match(text).group()
    try:
        price = float(number)
    except ValueError:
        return 0.0
    return price if math.isfinite(price) else 0.0


def to_quantity(raw: Any) -> int:
    digits = _NON_DIGITS.sub("", str(raw if raw is not None else "")).lstrip("0")
    if not digits:
        return 0
    try:
        return min(int(digits), MAX_QUANTITY)
    except ValueError:
        # Too many digits for int(); far beyond the cap either way.
        return MAX_QUANTITY


def to_text(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


class RecordCoercer:
    """
    Turns raw spreadsheet rows into InventoryItem records using a header mapping.
    Conversion never fails: a bad cell falls back to the field's default.
    """

    def __init__(self, entry_date_default: Optional[str] = None):
        # Fixed once per batch so every row without a date shares the same one.
        self.entry_date_default = entry_date_default or date.today().isoformat()

    def coerce(
        self, row: Mapping[str, Any], mapping: Mapping[str, CanonicalField]
    ) -> InventoryItem:
        source_header = {field: header for header, field in mapping.items()}

        def cell(field: CanonicalField) -> Any:
            header = source_header.get(field)
            return row.get(header, "") if header is not None else ""

        return InventoryItem(
            model=to_text(cell(CanonicalField.MODEL)),
            brand=to_text(cell(CanonicalField.BRAND)),
            type=to_text(cell(CanonicalField.TYPE)),
            color=to_text(cell(CanonicalField.COLOR)),
            unit_price=to_price(cell(CanonicalField.PRICE)),
            quantity=to_quantity(cell(CanonicalField.QUANTITY)),
            supplier=to_text(cell(CanonicalField.SUPPLIER)),
            entry_date=to_text(cell(CanonicalField.ENTRY_DATE))
            or self.entry_date_default,
            notes=to_text(cell(CanonicalField.NOTES)),
        )

    def coerce_batch(
        self,
        rows: Iterable[Mapping[str, Any]],
        mapping: Mapping[str, CanonicalField],
    ) -> list[InventoryItem]:
        return [self.coerce(row, mapping) for row in rows]
