"""Row construction shared by the spreadsheet and manual-entry sources."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from wagefile.core.exceptions import ValidationError
from wagefile.models.input_row import COLUMN_FIELDS, InputRow

# Manual rows are numbered as if they sat below a header line
MANUAL_FIRST_ROW = 2


def make_row(row_number: int, cells: Mapping[str, str]) -> InputRow | None:
    """Build an InputRow from column-keyed text; None for a blank row.

    Raises ValidationError when a non-blank row leaves a column empty.
    """
    values = {attr: (cells.get(column) or "").strip() for column, attr in COLUMN_FIELDS.items()}
    if not any(values.values()):
        return None

    for column, attr in COLUMN_FIELDS.items():
        if not values[attr]:
            raise ValidationError(row_number, column, "Field is required.")
    return InputRow(row_number=row_number, **values)


def _by_column(entry: Mapping[str, Any]) -> dict[str, str]:
    """Accept either spreadsheet headers or InputRow attribute names as keys."""
    cells: dict[str, str] = {}
    for column, attr in COLUMN_FIELDS.items():
        value = entry.get(column, entry.get(attr))
        cells[column] = "" if value is None else str(value)
    return cells


class ManualRowSource:
    """IRowSource over rows typed into a form grid."""

    def __init__(self, entries: Sequence[Mapping[str, Any]]) -> None:
        self._entries = entries

    def rows(self) -> list[InputRow]:
        rows: list[InputRow] = []
        for i, entry in enumerate(self._entries):
            row = make_row(i + MANUAL_FIRST_ROW, _by_column(entry))
            if row is not None:
                rows.append(row)
        return rows
