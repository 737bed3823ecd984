import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union
import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import AggregateBucket, DimensionSummary, InventoryItem, QuantityBucket

logger = logging.getLogger(__name__)

# Columns shown for item listings in exported reports.
REPORT_ITEM_FIELDS = ["model", "brand", "type", "color", "unit_price", "quantity", "supplier"]


def items_to_frame(items: Sequence[InventoryItem]) -> pd.DataFrame:
    columns = {
        field: InventoryItem.model_fields[field].alias for field in REPORT_ITEM_FIELDS
    }
    df = pd.DataFrame(
        [item.model_dump(include=set(REPORT_ITEM_FIELDS)) for item in items],
        columns=REPORT_ITEM_FIELDS,
    )
    return df.rename(columns=columns)


def buckets_to_frame(
    buckets: Sequence[Union[AggregateBucket, QuantityBucket]],
    label_header: str,
    with_value: bool = True,
) -> pd.DataFrame:
    rows = []
    for bucket in buckets:
        row = {label_header: bucket.label, "Quantidade": bucket.quantity}
        if with_value:
            row["Valor em Estoque"] = round(bucket.value, 2)
        rows.append(row)

    columns = [label_header, "Quantidade"] + (["Valor em Estoque"] if with_value else [])
    return pd.DataFrame(rows, columns=columns)


def summaries_to_frame(
    summaries: Sequence[DimensionSummary], label_header: str
) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                label_header: summary.label,
                "Total": summary.total,
                "Zerados": summary.zeroed,
                "Abaixo do Mínimo": summary.below_minimum,
            }
            for summary in summaries
        ],
        columns=[label_header, "Total", "Zerados", "Abaixo do Mínimo"],
    )


def save_workbook(
    sheets: dict[str, pd.DataFrame], base_name: str, output_dir: Optional[Path] = None
) -> Path:
    """Writes one sheet per DataFrame into a dated .xlsx file."""
    output_dir = output_dir or settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    xlsx_path = output_dir / f"{base_name}_{utils.get_date_suffix_for_filename()}.xlsx"

    with pd.ExcelWriter(xlsx_path, engine="openpyxl") as writer:
        for sheet_name, df in sheets.items():
            # Excel caps sheet names at 31 characters
            df.to_excel(writer, sheet_name=sheet_name[:31], index=False)

    logger.info(f"✅ Report saved to: {xlsx_path}")
    return xlsx_path


def save_json(
    payload: dict[str, Any], base_name: str, output_dir: Optional[Path] = None
) -> Optional[Path]:
    if not settings.SAVE_JSON_OUTPUT:
        logger.info("INFO: Skipping JSON file save as per configuration.")
        return None

    output_dir = output_dir or settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"{base_name}_{utils.get_date_suffix_for_filename()}.json"

    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=str)
    logger.info(f"✅ JSON output saved to: {json_path}")
    return json_path


def post_to_webhook(payload: dict[str, Any], report_type: str) -> bool:
    """
    Posts a report summary to the configured webhook.
    Failures are logged; they never abort the report.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} report to webhook.")
    try:
        response = requests.post(
            settings.WEBHOOK_URL,
            json={"reportType": report_type, "reportData": payload},
            timeout=15,
        )
        response.raise_for_status()
        logger.info("✅ Report successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False


def write_import_template(path: Path) -> Path:
    """Writes an example spreadsheet with every column the importer recognizes."""
    template = pd.DataFrame(
        [
            {
                "Modelo": "iPhone 15 Pro",
                "Marca": "Apple",
                "Tipo": "Silicone",
                "Cor": "Preto",
                "Preço": 29.90,
                "Quantidade": 50,
                "Fornecedor": "Fornecedor A",
                "Data Entrada": "2024-01-15",
                "Observações": "Modelo mais vendido",
            },
            {
                "Modelo": "Galaxy S24",
                "Marca": "Samsung",
                "Tipo": "Rígida",
                "Cor": "Transparente",
                "Preço": 24.90,
                "Quantidade": 30,
                "Fornecedor": "Fornecedor B",
                "Data Entrada": "2024-01-20",
                "Observações": "",
            },
        ]
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        template.to_csv(path, index=False)
    else:
        template.to_excel(path, sheet_name="Capas", index=False, engine="openpyxl")
    logger.info(f"✅ Import template saved to: {path}")
    return path
