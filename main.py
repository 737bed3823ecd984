import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from case_inventory import data_handler, settings
from case_inventory.exceptions import InventoryError
from case_inventory.logger import setup_logger
from case_inventory.pipelines.importer import ImportPipeline
from case_inventory.pipelines.reports import StatsReportPipeline, StockReportPipeline
from case_inventory.schemas import CanonicalField
from case_inventory.store import CatalogStore

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def column_override(value: str) -> tuple[str, Optional[CanonicalField]]:
    """Parses 'Header=field'; an empty field ('Header=') unmaps the header."""
    header, sep, field = value.rpartition("=")
    if not sep or not header:
        raise argparse.ArgumentTypeError(f"expected HEADER=FIELD, got {value!r}")
    if not field:
        return header, None
    try:
        return header, CanonicalField(field)
    except ValueError:
        choices = ", ".join(f.value for f in CanonicalField)
        raise argparse.ArgumentTypeError(f"unknown field {field!r} (choose from {choices})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Phone-case catalog: imports and stock reports.")
    parser.add_argument("--store", type=Path, default=None, help="Catalog JSON file.")
    parser.add_argument("--test-mode", action="store_true", help="Skip webhook posts.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Import a .xlsx/.xls/.csv spreadsheet.")
    import_cmd.add_argument("file", type=Path)
    import_cmd.add_argument(
        "--map",
        dest="overrides",
        type=column_override,
        action="append",
        default=[],
        metavar="HEADER=FIELD",
        help="Force a column onto a field (repeatable).",
    )

    stats_cmd = subparsers.add_parser("stats", help="Catalog totals and breakdowns.")
    stats_cmd.add_argument("--output-dir", type=Path, default=None)

    stock_cmd = subparsers.add_parser("stock", help="Zeroed and low stock report.")
    stock_cmd.add_argument("--threshold", type=positive_int, default=settings.LOW_STOCK_THRESHOLD)
    stock_cmd.add_argument("--type", dest="type_filter", default=None)
    stock_cmd.add_argument("--color", dest="color_filter", default=None)
    stock_cmd.add_argument("--output-dir", type=Path, default=None)

    template_cmd = subparsers.add_parser("template", help="Write an example import spreadsheet.")
    template_cmd.add_argument(
        "path", type=Path, nargs="?", default=settings.OUTPUT_DIR / settings.TEMPLATE_FILENAME
    )

    subparsers.add_parser("history", help="List previous imports.")
    subparsers.add_parser("seed", help="Load the demo catalog into an empty store.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()
    store = CatalogStore(args.store)

    try:
        if args.command == "import":
            ImportPipeline(
                args.file, store, overrides=dict(args.overrides), test_mode=args.test_mode
            ).run()
        elif args.command == "stats":
            StatsReportPipeline(store, output_dir=args.output_dir, test_mode=args.test_mode).run()
        elif args.command == "stock":
            StockReportPipeline(
                store,
                threshold=args.threshold,
                type_filter=args.type_filter,
                color_filter=args.color_filter,
                output_dir=args.output_dir,
                test_mode=args.test_mode,
            ).run()
        elif args.command == "template":
            data_handler.write_import_template(args.path)
        elif args.command == "history":
            for batch in store.list_import_batches():
                logger.info(
                    f"{batch.imported_at:%d/%m/%Y %H:%M}  {batch.file_name}  "
                    f"({batch.record_count} records)"
                )
        elif args.command == "seed":
            count = store.populate_sample_data()
            logger.info(f"Catalog holds {count} entries.")
    except InventoryError as e:
        logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
