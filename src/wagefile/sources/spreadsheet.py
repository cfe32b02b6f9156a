"""Excel row source and template generator (openpyxl)."""

from __future__ import annotations

import logging
import re
import zipfile
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException

from wagefile.core.exceptions import SpreadsheetError
from wagefile.models.input_row import COLUMN_FIELDS, REQUIRED_COLUMNS, InputRow
from wagefile.sources.rows import make_row

logger = logging.getLogger(__name__)

_ZERO_PAD_FORMAT = re.compile(r"0+")

TEMPLATE_SHEET = "Employees"
TEMPLATE_SAMPLE: tuple[str, ...] = (
    "JUAN CARLOS PEREZ LOPEZ",
    "123-45-6789",
    "1234.56",
    "1234567890",
    "001",
)


def normalize_header(value: Any) -> str:
    """Trim, collapse whitespace and uppercase a header cell."""
    return " ".join(str(value or "").split()).upper()


def cell_text(value: Any, number_format: str = "General") -> str:
    """Render a cell value as trimmed text.

    Whole numbers drop any fractional part; a zero-padding number format such
    as ``000`` pads them to its width, as the sheet displays them.
    """
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool) and float(value).is_integer():
        text = str(int(value))
        if _ZERO_PAD_FORMAT.fullmatch(number_format or ""):
            return text.zfill(len(number_format))
        return text
    return str(value).strip()


class SpreadsheetRowSource:
    """IRowSource reading employee rows from the first sheet of an .xlsx file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def rows(self) -> list[InputRow]:
        if not self._path.exists():
            raise SpreadsheetError(f"Excel file not found: {self._path}")
        try:
            workbook = openpyxl.load_workbook(self._path, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError) as exc:
            raise SpreadsheetError(f"Cannot read workbook {self._path}: {exc}") from exc

        try:
            sheet = workbook.worksheets[0]
            return self._read_sheet(sheet)
        finally:
            workbook.close()

    def _read_sheet(self, sheet: Any) -> list[InputRow]:
        header_map: dict[str, int] | None = None
        rows: list[InputRow] = []

        for row_number, sheet_cells in enumerate(sheet.iter_rows(min_row=1), start=1):
            if header_map is None:
                values = tuple(c.value for c in sheet_cells)
                if all(cell_text(v) == "" for v in values):
                    continue
                header_map = self._map_headers(values)
                continue

            cells = {
                column: cell_text(sheet_cells[idx].value, sheet_cells[idx].number_format)
                if idx < len(sheet_cells) else ""
                for column, idx in header_map.items()
            }
            row = make_row(row_number, cells)
            if row is not None:
                rows.append(row)

        if header_map is None:
            raise SpreadsheetError("Excel file has no data.")

        logger.info("Read %d employee rows from %s", len(rows), self._path.name)
        return rows

    @staticmethod
    def _map_headers(values: tuple[Any, ...]) -> dict[str, int]:
        found: dict[str, int] = {}
        for idx, value in enumerate(values):
            header = normalize_header(value)
            if header and header not in found:
                found[header] = idx

        missing = [c for c in REQUIRED_COLUMNS if normalize_header(c) not in found]
        if missing:
            raise SpreadsheetError(f"Missing required columns: {', '.join(missing)}")
        return {column: found[normalize_header(column)] for column in COLUMN_FIELDS}


def write_template(destination: str | Path) -> Path:
    """Write a blank employee workbook with the required headers and one sample row."""
    path = Path(destination)
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = TEMPLATE_SHEET

    for col, header in enumerate(REQUIRED_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=col, value=header)
        cell.font = Font(bold=True)
        sheet.column_dimensions[get_column_letter(col)].width = max(len(header), len(TEMPLATE_SAMPLE[col - 1])) + 2

    for col, sample in enumerate(TEMPLATE_SAMPLE, start=1):
        sheet.cell(row=2, column=col, value=sample)

    workbook.save(path)
    logger.info("Wrote employee template to %s", path)
    return path
