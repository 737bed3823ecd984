import pytest
from case_inventory.coercer import RecordCoercer, to_price, to_quantity, to_text
from case_inventory.schemas import MAX_QUANTITY, CanonicalField, InventoryItem

FULL_MAPPING = {
    "Modelo": CanonicalField.MODEL,
    "Marca": CanonicalField.BRAND,
    "Tipo": CanonicalField.TYPE,
    "Cor": CanonicalField.COLOR,
    "Preço": CanonicalField.PRICE,
    "Quantidade": CanonicalField.QUANTITY,
    "Fornecedor": CanonicalField.SUPPLIER,
    "Data Entrada": CanonicalField.ENTRY_DATE,
    "Observações": CanonicalField.NOTES,
}


class TestToPrice:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("R$ 1.234,56", 1234.56),
            ("29,90", 29.9),
            ("29.90", 29.9),
            ("$1,234.56", 1234.56),
            ("  15 ", 15.0),
            ("", 0.0),
            ("abc", 0.0),
            (".", 0.0),
            ("-12,50", 12.5),
            (None, 0.0),
        ],
    )
    def test_parses_or_defaults(self, raw, expected):
        assert to_price(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "abc", "R$", "1.2.3", ",,", "--", "1e5", "∞"])
    def test_never_negative(self, raw):
        assert to_price(raw) >= 0

    def test_out_of_range_is_zero(self):
        assert to_price("9" * 400) == 0.0


class TestToQuantity:
    @pytest.mark.parametrize(
        "raw,expected",
        [("50", 50), (" 12 un", 12), ("", 0), ("abc", 0), ("-3", 3), (None, 0)],
    )
    def test_parses_or_defaults(self, raw, expected):
        assert to_quantity(raw) == expected

    def test_leading_zeros(self):
        assert to_quantity("0" * 5000 + "7") == 7

    @pytest.mark.parametrize("raw", ["99999999999999999999", "9" * 5000])
    def test_oversized_counts_are_clamped(self, raw):
        assert to_quantity(raw) == MAX_QUANTITY


class TestToText:
    def test_trims(self):
        assert to_text("  Apple ") == "Apple"

    def test_none_is_empty(self):
        assert to_text(None) == ""


class TestRecordCoercer:
    def test_full_row(self):
        row = {
            "Modelo": "iPhone 15 Pro",
            "Marca": "Apple",
            "Tipo": "Silicone",
            "Cor": "Preto",
            "Preço": "R$ 29,90",
            "Quantidade": "50",
            "Fornecedor": "Fornecedor A",
            "Data Entrada": "2024-01-15",
            "Observações": " Modelo mais vendido ",
        }
        item = RecordCoercer("2026-01-01").coerce(row, FULL_MAPPING)

        assert item == InventoryItem(
            model="iPhone 15 Pro",
            brand="Apple",
            type="Silicone",
            color="Preto",
            unit_price=29.9,
            quantity=50,
            supplier="Fornecedor A",
            entry_date="2024-01-15",
            notes="Modelo mais vendido",
        )

    def test_unmapped_fields_take_defaults(self):
        item = RecordCoercer("2026-01-01").coerce(
            {"Modelo": "Moto G84", "Extra": "x"}, {"Modelo": CanonicalField.MODEL}
        )
        assert item.model == "Moto G84"
        assert item.brand == ""
        assert item.unit_price == 0
        assert item.quantity == 0
        assert item.entry_date == "2026-01-01"

    def test_dirty_cells_never_raise(self):
        row = {"Modelo": "", "Preço": "grátis", "Quantidade": "muitos"}
        mapping = {
            "Modelo": CanonicalField.MODEL,
            "Preço": CanonicalField.PRICE,
            "Quantidade": CanonicalField.QUANTITY,
        }
        item = RecordCoercer().coerce(row, mapping)
        assert item.model == ""
        assert item.unit_price == 0
        assert item.quantity == 0

    def test_missing_header_in_row(self):
        item = RecordCoercer().coerce({}, FULL_MAPPING)
        assert item.model == ""
        assert item.quantity == 0

    def test_oversized_numbers_never_raise(self):
        row = {"Preço": "9" * 5000, "Quantidade": "9" * 5000}
        mapping = {"Preço": CanonicalField.PRICE, "Quantidade": CanonicalField.QUANTITY}
        item = RecordCoercer().coerce(row, mapping)
        assert item.unit_price == 0
        assert item.quantity == MAX_QUANTITY

    def test_batch_shares_entry_date_default(self):
        rows = [{"Modelo": "A"}, {"Modelo": "B", "Data": "2024-05-01"}]
        mapping = {"Modelo": CanonicalField.MODEL, "Data": CanonicalField.ENTRY_DATE}
        items = RecordCoercer("2026-10-19").coerce_batch(rows, mapping)
        assert [item.entry_date for item in items] == ["2026-10-19", "2024-05-01"]

    def test_batch_keeps_row_count_and_order(self):
        rows = [{"Modelo": name} for name in ("C", "A", "B")]
        items = RecordCoercer().coerce_batch(rows, {"Modelo": CanonicalField.MODEL})
        assert [item.model for item in items] == ["C", "A", "B"]

    @pytest.mark.parametrize(
        "price,quantity", [(0.0, 0), (29.9, 50), (1234.56, 7), (0.5, 1000)]
    )
    def test_stringified_numbers_round_trip(self, price, quantity):
        original = InventoryItem(model="X", unit_price=price, quantity=quantity)
        row = {"Preço": str(original.unit_price), "Quantidade": str(original.quantity)}
        mapping = {"Preço": CanonicalField.PRICE, "Quantidade": CanonicalField.QUANTITY}

        item = RecordCoercer().coerce(row, mapping)
        assert item.unit_price == original.unit_price
        assert item.quantity == original.quantity
