import logging
from abc import ABC, abstractmethod
from typing import Any

from .exceptions import InventoryError

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for catalog pipelines (import, stats, stock).
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, test_mode: bool = False):
        self.report_type = report_type
        self.test_mode = test_mode

    def run(self) -> Any:
        """
        Orchestrates the pipeline execution and returns whatever `load` produced.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()}")
        logger.info("-" * 30)

        try:
            # --- 1. EXTRACT ---
            raw_data = self.extract()

            # --- 2. TRANSFORM ---
            result = self.transform(raw_data)

            # --- 3. LOAD ---
            outcome = self.load(result)
        except InventoryError as e:
            logger.error(f"❌ {self.report_type.capitalize()} pipeline failed: {e}")
            raise

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return outcome

    @abstractmethod
    def extract(self) -> Any:
        """Reads the pipeline's source: a spreadsheet or the catalog store."""
        pass

    @abstractmethod
    def transform(self, data: Any) -> Any:
        pass

    @abstractmethod
    def load(self, result: Any) -> Any:
        """Persists or exports the transformed result."""
        pass
