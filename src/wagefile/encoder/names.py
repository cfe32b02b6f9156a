"""Full-name parsing for the paternal/maternal surname convention."""

from __future__ import annotations

from wagefile.core.result import Result
from wagefile.core.types import RowNumber
from wagefile.models.input_row import COL_FULL_NAME
from wagefile.models.record import ParsedName


def upper_invariant(text: str) -> str:
    """Uppercase character by character without changing the text length.

    Characters whose uppercase form is longer are kept as-is, so ``ß`` stays
    ``ß`` instead of becoming ``SS``.
    """
    return "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in text)


def parse_name(row_number: RowNumber, full_name: str) -> Result[ParsedName]:
    """Split a free-text name into first, middle initial and two surnames.

    4+ tokens: FIRST MIDDLE PATERNAL MATERNAL (extra tokens are dropped).
    3 tokens:  FIRST MIDDLE PATERNAL.
    2 tokens:  FIRST PATERNAL, with a blank middle initial.
    """
    tokens = upper_invariant(full_name or "").split()

    if len(tokens) < 2:
        return Result.fail(row_number, COL_FULL_NAME, "Full name must contain at least 2 tokens.")

    if len(tokens) >= 4:
        return Result.ok(ParsedName(
            first=tokens[0],
            middle_initial=tokens[1][0],
            paternal_last_name=tokens[2],
            maternal_last_name=tokens[3],
        ))

    if len(tokens) == 3:
        return Result.ok(ParsedName(
            first=tokens[0],
            middle_initial=tokens[1][0],
            paternal_last_name=tokens[2],
        ))

    return Result.ok(ParsedName(first=tokens[0], middle_initial=" ", paternal_last_name=tokens[1]))
