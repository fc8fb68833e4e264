"""
CATALOG WRITER
--------------
Writes catalog rows to a single-sheet workbook. Columns are the union of all
row keys in first-seen order; cells a row doesn't have are left empty.
Strings are always written as text cells, with control characters that
worksheets cannot hold removed.
"""

from __future__ import annotations

import io
import logging
import time
from pathlib import Path
from typing import List, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font

from config.settings import CATALOG_SHEET_NAME
from domain.catalog import CatalogRow

logger = logging.getLogger(__name__)


def catalog_headers(rows: Sequence[CatalogRow]) -> List[str]:
    headers: List[str] = []
    seen = set()
    for row in rows:
        for key in row:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def _write_cell(ws, row: int, column: int, value) -> None:
    if isinstance(value, str):
        cell = ws.cell(row=row, column=column, value=ILLEGAL_CHARACTERS_RE.sub("", value))
        # text starting with "=" stays text, never a formula
        cell.data_type = "s"
    else:
        ws.cell(row=row, column=column, value=value)


def _build_workbook(rows: Sequence[CatalogRow], sheet_name: str) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    headers = catalog_headers(rows)
    for c, header in enumerate(headers, start=1):
        _write_cell(ws, 1, c, header)
        ws.cell(row=1, column=c).font = Font(bold=True)

    for r, row in enumerate(rows, start=2):
        for c, header in enumerate(headers, start=1):
            value = row.get(header)
            if value is not None:
                _write_cell(ws, r, c, value)

    return wb


def catalog_to_xlsx_bytes(rows: Sequence[CatalogRow], sheet_name: str = CATALOG_SHEET_NAME) -> bytes:
    """Serialize the catalog to .xlsx bytes (for download buttons)."""
    buffer = io.BytesIO()
    _build_workbook(rows, sheet_name).save(buffer)
    return buffer.getvalue()


def write_catalog_xlsx(
    output_path: Path,
    rows: Sequence[CatalogRow],
    sheet_name: str = CATALOG_SHEET_NAME,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _build_workbook(rows, sheet_name).save(output_path)
    logger.info("Wrote %d catalog rows to %s", len(rows), output_path)
    return output_path


def catalog_filename() -> str:
    return f"catalog_{time.time_ns() // 1_000_000}.xlsx"
