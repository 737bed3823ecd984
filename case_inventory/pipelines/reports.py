import logging
from pathlib import Path
from typing import Optional
import pandas as pd

from case_inventory import data_handler, settings
from case_inventory.aggregation import aggregate
from case_inventory.pipeline import DataPipeline
from case_inventory.schemas import CatalogStats, InventoryItem, StockReport
from case_inventory.stock import classify
from case_inventory.store import CatalogStore

logger = logging.getLogger(__name__)


class StatsReportPipeline(DataPipeline):
    """Catalog totals and brand/type/color breakdowns."""

    def __init__(
        self,
        store: CatalogStore,
        output_dir: Optional[Path] = None,
        test_mode: bool = False,
    ):
        super().__init__("stats", test_mode=test_mode)
        self.store = store
        self.output_dir = output_dir
        self.output_path: Optional[Path] = None

    def extract(self) -> list[InventoryItem]:
        return self.store.list_all()

    def transform(self, items: list[InventoryItem]) -> CatalogStats:
        return aggregate(items)

    def load(self, stats: CatalogStats) -> CatalogStats:
        logger.info("\n--- Catalog Summary ---")
        logger.info(f"Models: {stats.total_models}")
        logger.info(f"Units: {stats.total_units}")
        logger.info(f"Stock value: {stats.total_value:.2f}")

        summary = pd.DataFrame(
            [
                ["Total de Modelos", stats.total_models],
                ["Total de Unidades", stats.total_units],
                ["Valor Total em Estoque", round(stats.total_value, 2)],
            ],
            columns=["Indicador", "Valor"],
        )
        sheets = {
            "Resumo": summary,
            "Por Marca": data_handler.buckets_to_frame(stats.by_brand, "Marca"),
            "Por Tipo": data_handler.buckets_to_frame(stats.by_type, "Tipo"),
            "Por Cor": data_handler.buckets_to_frame(stats.by_color, "Cor", with_value=False),
            "Top Modelos": data_handler.items_to_frame(stats.top_items),
        }
        self.output_path = data_handler.save_workbook(
            sheets, settings.STATS_REPORT_BASE, self.output_dir
        )
        data_handler.save_json(
            stats.model_dump(mode="json"), settings.STATS_REPORT_BASE, self.output_dir
        )

        if not self.test_mode:
            data_handler.post_to_webhook(
                {
                    "totalModels": stats.total_models,
                    "totalUnits": stats.total_units,
                    "totalValue": round(stats.total_value, 2),
                },
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
        return stats


class StockReportPipeline(DataPipeline):
    """Zeroed / below-minimum stock, optionally narrowed to one type or color."""

    def __init__(
        self,
        store: CatalogStore,
        threshold: int = settings.LOW_STOCK_THRESHOLD,
        type_filter: Optional[str] = None,
        color_filter: Optional[str] = None,
        output_dir: Optional[Path] = None,
        test_mode: bool = False,
    ):
        super().__init__("stock", test_mode=test_mode)
        self.store = store
        self.threshold = threshold
        self.type_filter = type_filter
        self.color_filter = color_filter
        self.output_dir = output_dir
        self.output_path: Optional[Path] = None

    def extract(self) -> list[InventoryItem]:
        return self.store.list_all()

    def transform(self, items: list[InventoryItem]) -> StockReport:
        return classify(
            items,
            threshold=self.threshold,
            type_filter=self.type_filter,
            color_filter=self.color_filter,
        )

    def load(self, report: StockReport) -> StockReport:
        logger.info(f"\n--- Stock Status (minimum: {report.threshold}) ---")
        logger.info(f"Items considered: {report.total_filtered}")
        logger.info(f"Zeroed: {len(report.zeroed)}")
        logger.info(f"Below minimum: {len(report.below_minimum)}")
        logger.info(f"Healthy: {len(report.healthy)}")

        sheets = {}
        if report.zeroed:
            sheets["Estoque Zerado"] = data_handler.items_to_frame(report.zeroed)
        if report.below_minimum:
            sheets["Abaixo do Mínimo"] = data_handler.items_to_frame(report.below_minimum)
        sheets["Resumo por Tipo"] = data_handler.summaries_to_frame(report.by_type, "Tipo")
        sheets["Resumo por Cor"] = data_handler.summaries_to_frame(report.by_color, "Cor")

        self.output_path = data_handler.save_workbook(
            sheets, settings.STOCK_REPORT_BASE, self.output_dir
        )
        data_handler.save_json(
            report.model_dump(mode="json"), settings.STOCK_REPORT_BASE, self.output_dir
        )

        if not self.test_mode:
            data_handler.post_to_webhook(
                {
                    "threshold": report.threshold,
                    "zeroed": len(report.zeroed),
                    "belowMinimum": len(report.below_minimum),
                    "healthy": len(report.healthy),
                },
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
        return report
