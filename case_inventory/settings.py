import os
from pathlib import Path
from dotenv import load_dotenv

from .schemas import CanonicalField

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
STORE_PATH = BASE_DIR / os.getenv("STORE_PATH", "data/catalog.json")

# --- Filename Configuration ---
STATS_REPORT_BASE = os.getenv("STATS_REPORT_BASE", "relatorio_capas")
STOCK_REPORT_BASE = os.getenv("STOCK_REPORT_BASE", "relatorio_estoque")
TEMPLATE_FILENAME = os.getenv("TEMPLATE_FILENAME", "template_capas.xlsx")

# --- Output Toggles ---
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() in ("1", "true", "yes")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Shared Business Logic ---
LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", "5"))
TOP_ITEMS_LIMIT = int(os.getenv("TOP_ITEMS_LIMIT", "10"))

# Only these extensions ever reach the column mapper.
SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")

# Bucket labels for items with an empty dimension value.
UNSPECIFIED_BRAND = os.getenv("UNSPECIFIED_BRAND", "Sem marca")
UNSPECIFIED_TYPE = os.getenv("UNSPECIFIED_TYPE", "Sem tipo")
UNSPECIFIED_COLOR = os.getenv("UNSPECIFIED_COLOR", "Sem cor")

# Header aliases per canonical field. The order of the entries is the match
# priority: the first field with an alias contained in a header wins.
COLUMN_ALIASES: tuple[tuple[CanonicalField, tuple[str, ...]], ...] = (
    (
        CanonicalField.MODEL,
        ("modelo", "model", "nome", "name", "produto", "product", "celular", "aparelho"),
    ),
    (CanonicalField.BRAND, ("marca", "brand", "fabricante", "manufacturer")),
    (CanonicalField.TYPE, ("tipo", "type", "categoria", "category", "material")),
    (CanonicalField.COLOR, ("cor", "color", "colour")),
    (CanonicalField.PRICE, ("preco", "price", "valor", "value", "custo", "cost")),
    (
        CanonicalField.QUANTITY,
        ("quantidade", "qty", "qtd", "quantity", "estoque", "stock", "quant"),
    ),
    (CanonicalField.SUPPLIER, ("fornecedor", "supplier", "vendor", "distribuidor")),
    (
        CanonicalField.ENTRY_DATE,
        ("data", "date", "data_entrada", "entrada", "data entrada"),
    ),
    (CanonicalField.NOTES, ("observacoes", "obs", "notes", "notas", "observacao")),
)
