"""
CATALOG READER
--------------
Reads an uploaded catalog spreadsheet (Excel or CSV) into flat row dicts.
Row 1 holds the headers; empty rows are skipped and empty cells are left out
of their row, so every row only carries the columns it actually fills.
"""

from __future__ import annotations

import io
import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import IO, Any, List, Union

import pandas as pd
from openpyxl import load_workbook

from config.settings import MAX_FILE_SIZE_MB, MAX_SHEET_COLS, MAX_SHEET_ROWS
from domain.catalog import CatalogRow, validate_row

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}

Source = Union[str, Path, IO[bytes]]


def _to_cell_value(value: Any) -> Any:
    """Convert spreadsheet-native values into catalog scalars; None means 'leave the cell out'."""
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).upper()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    return text or None


def _check_limits(n_rows: int, n_cols: int) -> None:
    if n_rows > MAX_SHEET_ROWS:
        raise ValueError(f"Sheet has {n_rows:,} rows, limit is {MAX_SHEET_ROWS:,}")
    if n_cols > MAX_SHEET_COLS:
        raise ValueError(f"Sheet has {n_cols:,} columns, limit is {MAX_SHEET_COLS:,}")


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, (str, Path)):
        path = Path(source).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")
        data = path.read_bytes()
    else:
        data = source.read()

    size_mb = len(data) / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        raise ValueError(f"File is {size_mb:.1f} MB, limit is {MAX_FILE_SIZE_MB} MB")
    return data


def _read_excel_rows(data: bytes, sheet_name: str | None) -> List[CatalogRow]:
    try:
        wb = load_workbook(io.BytesIO(data), data_only=True, read_only=True)
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}")

    try:
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        values = ws.iter_rows(values_only=True)

        header_row = next(values, None)
        if header_row is None:
            return []

        headers = [
            str(h).strip() if h is not None else f"col_{c}" for c, h in enumerate(header_row, start=1)
        ]
        _check_limits(0, len(headers))

        rows: List[CatalogRow] = []
        for r, raw in enumerate(values, start=2):
            row: CatalogRow = {}
            for header, value in zip(headers, raw):
                cell = _to_cell_value(value)
                if cell is not None:
                    row[header] = cell
            if row:
                rows.append(validate_row(row, r))
            _check_limits(len(rows), len(headers))
    finally:
        wb.close()

    return rows


def _read_csv_rows(data: bytes) -> List[CatalogRow]:
    try:
        df = pd.read_csv(io.BytesIO(data))
    except pd.errors.EmptyDataError:
        return []
    except Exception as e:
        raise ValueError(f"Cannot read CSV file: {e}")

    _check_limits(len(df), len(df.columns))

    rows: List[CatalogRow] = []
    for r, record in enumerate(df.to_dict(orient="records"), start=2):
        row: CatalogRow = {}
        for header, value in record.items():
            if pd.isna(value):
                continue
            if hasattr(value, "item"):
                value = value.item()
            cell = _to_cell_value(value)
            if cell is not None:
                row[str(header).strip()] = cell
        if row:
            rows.append(validate_row(row, r))
    return rows


def read_catalog(
    source: Source,
    filename: str | None = None,
    sheet_name: str | None = None,
) -> List[CatalogRow]:
    """
    Read a catalog spreadsheet.

    Args:
        source: Path to the file, or an open binary file object (e.g. an upload)
        filename: Name used to pick the format when `source` is a file object
        sheet_name: Optional sheet name for Excel files (uses first sheet if None)

    Returns:
        List of row dicts keyed by the header row

    Raises:
        FileNotFoundError: If a path is given and doesn't exist
        ValueError: If the file is unreadable, too large, or not .xlsx/.xlsm/.csv
    """
    name = filename or (str(source) if isinstance(source, (str, Path)) else getattr(source, "name", ""))
    suffix = Path(name).suffix.lower()
    if suffix not in EXCEL_SUFFIXES | CSV_SUFFIXES:
        raise ValueError(f"Unsupported catalog file type {suffix or '(none)'!r}, expected .xlsx or .csv")

    data = _read_bytes(source)
    rows = _read_csv_rows(data) if suffix in CSV_SUFFIXES else _read_excel_rows(data, sheet_name)

    logger.info("Loaded %d catalog rows from %s", len(rows), name)
    return rows
