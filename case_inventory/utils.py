import logging
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Any
import pandas as pd
import xlrd

from . import settings
from .exceptions import EmptySourceError, UnreadableSourceError, UnsupportedFormatError

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def check_extension(file_path: Path) -> str:
    """Returns the lowercased extension, rejecting anything we cannot read."""
    extension = file_path.suffix.lower()
    if extension not in settings.SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(file_path.name, settings.SUPPORTED_EXTENSIONS)
    return extension


def _detect_delimiter(file_path: Path) -> str:
    """Semicolon when the header line has more ';' than ',' (pt-BR Excel exports)."""
    with open(file_path, "rb") as f:
        header_line = f.readline().decode("latin-1")
    return ";" if header_line.count(";") > header_line.count(",") else ","


def load_csv(file_path: Path) -> pd.DataFrame:
    """
    CSV loader with an encoding fallback.
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte.
    """
    options = dict(dtype=str, keep_default_na=False, sep=_detect_delimiter(file_path))
    try:
        return pd.read_csv(file_path, encoding="utf-8-sig", **options)
    except UnicodeDecodeError:
        logger.info(f"UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        return pd.read_csv(file_path, encoding="latin-1", **options)


def _cell_to_str(value: Any) -> str:
    """Spreadsheet cell -> string, the way a user would have typed it."""
    if value is None or (isinstance(value, float) and pd.isna(value)) or value is pd.NaT:
        return ""
    if isinstance(value, datetime):
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    # Excel stores 50 as 50.0; keep it as '50' so digit-stripping stays correct.
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def load_spreadsheet(file_path: Path) -> list[dict[str, str]]:
    """
    Reads the first sheet of an .xlsx/.xls file, or a delimited text file,
    into ordered rows of {header: cell string}. Empty cells are "" and rows
    with no content at all are dropped.
    """
    extension = check_extension(file_path)

    try:
        if extension == ".csv":
            df = load_csv(file_path)
        else:
            df = pd.read_excel(file_path, sheet_name=0, dtype=object)
    except pd.errors.EmptyDataError:
        raise EmptySourceError(file_path.name)
    # ParserError and an undetectable Excel format are both ValueErrors;
    # a corrupt workbook fails inside the zip or xls reader.
    except (ValueError, KeyError, zipfile.BadZipFile, xlrd.XLRDError) as e:
        raise UnreadableSourceError(file_path.name, str(e)) from e

    rows = [
        {str(header): _cell_to_str(value) for header, value in record.items()}
        for record in df.to_dict("records")
    ]
    rows = [row for row in rows if any(cell for cell in row.values())]

    if not rows:
        raise EmptySourceError(file_path.name)

    logger.info(f"✅ Read {len(rows)} rows from {file_path.name}.")
    return rows
