"""Submission artifact: filename rule and line rendering."""

from __future__ import annotations

from typing import Iterable

from wagefile.core.exceptions import WageFileError

LINE_SEPARATOR = "\r\n"
ENCODING = "utf-8"  # no BOM
CONTENT_TYPE = "text/plain; charset=utf-8"
FILENAME_PREFIX = "Wages"


def quarter_for_month(month: int) -> int:
    if not 1 <= month <= 12:
        raise WageFileError(f"Month must be 1-12, got {month}.")
    return (month - 1) // 3 + 1


def output_filename(year: int, quarter: int) -> str:
    """``Wages{yy}{q}.txt``, e.g. ``Wages253.txt`` for Q3 2025."""
    if quarter not in (1, 2, 3, 4):
        raise WageFileError("Quarter must be selected (1-4).")
    return f"{FILENAME_PREFIX}{year % 100:02d}{quarter}.txt"


def render_artifact(lines: Iterable[str], trailing_newline: bool = False) -> bytes:
    """Join record lines with CRLF and encode as UTF-8 without a byte-order mark."""
    content = LINE_SEPARATOR.join(lines)
    if trailing_newline:
        content += LINE_SEPARATOR
    return content.encode(ENCODING)
