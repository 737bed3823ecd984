from case_inventory import settings
from case_inventory.stock import classify
from conftest import make_item


def _summary(summaries):
    return {s.label: (s.total, s.zeroed, s.below_minimum, s.healthy) for s in summaries}


class TestPartition:
    def test_three_buckets(self):
        items = [make_item(quantity=0), make_item(quantity=3), make_item(quantity=10)]
        report = classify(items, threshold=5)
        assert [i.quantity for i in report.zeroed] == [0]
        assert [i.quantity for i in report.below_minimum] == [3]
        assert [i.quantity for i in report.healthy] == [10]

    def test_threshold_itself_is_below_minimum(self):
        report = classify([make_item(quantity=5)], threshold=5)
        assert len(report.below_minimum) == 1
        assert report.healthy == []

    def test_just_above_threshold_is_healthy(self):
        report = classify([make_item(quantity=6)], threshold=5)
        assert len(report.healthy) == 1

    def test_buckets_are_disjoint_and_complete(self, catalog):
        report = classify(catalog, threshold=5)
        sizes = len(report.zeroed) + len(report.below_minimum) + len(report.healthy)
        assert sizes == report.total_filtered == len(catalog)

    def test_empty_catalog(self):
        report = classify([], threshold=5)
        assert report.zeroed == report.below_minimum == report.healthy == []
        assert report.by_type == report.by_color == []
        assert report.types_unique == report.colors_unique == []
        assert report.total_filtered == 0


class TestFilters:
    def test_type_filter_is_case_insensitive(self, catalog):
        report = classify(catalog, threshold=5, type_filter="silicone")
        assert {item.model for item in report.zeroed + report.healthy} == {"iPhone 15", "Galaxy S24"}
        assert report.total_filtered == 2

    def test_combined_filters(self, catalog):
        report = classify(catalog, threshold=5, type_filter="SILICONE", color_filter="preto")
        assert report.total_filtered == 2

    def test_empty_filter_means_no_filter(self, catalog):
        assert classify(catalog, threshold=5, type_filter="").total_filtered == len(catalog)

    def test_absent_value_keeps_unique_lists(self, catalog):
        report = classify(catalog, threshold=5, type_filter="Couro")
        assert report.zeroed == report.below_minimum == report.healthy == []
        assert report.by_type == []
        assert report.types_unique == ["Carteira", "Rígida", "Silicone"]
        assert report.colors_unique == ["Azul", "Marrom", "Preto"]


class TestSummaries:
    def test_by_type(self, catalog):
        summary = _summary(classify(catalog, threshold=5).by_type)
        assert summary == {
            "Silicone": (2, 1, 0, 1),
            "Carteira": (1, 0, 1, 0),
            settings.UNSPECIFIED_TYPE: (1, 0, 1, 0),
            "Rígida": (1, 0, 0, 1),
        }

    def test_by_color(self, catalog):
        summary = _summary(classify(catalog, threshold=5).by_color)
        assert summary == {
            "Preto": (2, 1, 0, 1),
            "Marrom": (1, 0, 1, 0),
            "Azul": (1, 0, 1, 0),
            settings.UNSPECIFIED_COLOR: (1, 0, 0, 1),
        }

    def test_summaries_follow_filters(self, catalog):
        report = classify(catalog, threshold=5, color_filter="Preto")
        assert [s.label for s in report.by_color] == ["Preto"]
        assert [s.label for s in report.by_type] == ["Silicone"]
