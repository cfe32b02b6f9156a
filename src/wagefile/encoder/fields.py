"""Field builders: normalize and validate raw row values for the layout.

Each builder returns ``Result[str]``; a failed result names the spreadsheet
column the operator has to fix.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from wagefile.core.result import Result
from wagefile.core.types import BatchNumber, RowNumber
from wagefile.encoder.codec import format_field
from wagefile.models.input_row import COL_ACCOUNT, COL_BATCH, COL_QUARTER, COL_SALARY, COL_SSN
from wagefile.models.record import Alignment

SSN_LENGTH = 9
SALARY_LENGTH = 7
QUARTER_LENGTH = 3
BATCH_LENGTH = 6

INVARIANT_DECIMAL_SEPARATOR = "."
INVARIANT_GROUP_SEPARATOR = ","

_SSN_STRIP = re.compile(r"[-\s]")
_ASCII_DIGITS = re.compile(r"[0-9]+")
_CENTS = Decimal("0.01")


def build_ssn(row_number: RowNumber, raw: str) -> Result[str]:
    digits = _SSN_STRIP.sub("", raw or "")
    if not digits or not _ASCII_DIGITS.fullmatch(digits):
        return Result.fail(row_number, COL_SSN, "SSN must contain only digits after removing dashes/spaces.")
    if len(digits) > SSN_LENGTH:
        return Result.fail(row_number, COL_SSN, "SSN has more than 9 digits.")
    return Result.ok(format_field(digits, SSN_LENGTH, Alignment.RIGHT, "0"))


def parse_decimal(text: str, decimal_separator: str, group_separator: str) -> Optional[Decimal]:
    """Parse a number written with the given separators.

    Accepts surrounding whitespace, a leading or trailing sign, a ``$``
    currency symbol, parentheses for negatives, group separators in the
    integer part and an exponent. Returns None when ``text`` is not a number.
    """
    s = text.strip()
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1].strip()
    s = s.replace("$", "").strip()
    if s[:1] in ("+", "-"):
        negative ^= s[0] == "-"
        s = s[1:].strip()
    elif s[-1:] in ("+", "-"):
        negative ^= s[-1] == "-"
        s = s[:-1].strip()

    pattern = re.compile(
        r"(?P<int>\d[\d{g}]*)?(?:{d}(?P<frac>\d*))?(?P<exp>[eE][+-]?\d+)?".format(
            g=re.escape(group_separator), d=re.escape(decimal_separator),
        )
    )
    match = pattern.fullmatch(s)
    if match is None:
        return None
    int_part = (match.group("int") or "").replace(group_separator, "")
    frac_part = match.group("frac") or ""
    if not int_part and not frac_part:
        return None

    normalized = f"{int_part or '0'}.{frac_part or '0'}{match.group('exp') or ''}"
    try:
        value = Decimal(normalized)
    except InvalidOperation:
        return None
    return -value if negative else value


def build_salary(
    row_number: RowNumber,
    raw: str,
    fallback_decimal_separator: str = ",",
    fallback_group_separator: str = ".",
) -> Result[str]:
    cleaned = (raw or "").strip()
    if not cleaned:
        return Result.fail(row_number, COL_SALARY, "Salary is required.")

    amount = parse_decimal(cleaned, INVARIANT_DECIMAL_SEPARATOR, INVARIANT_GROUP_SEPARATOR)
    if amount is None:
        amount = parse_decimal(cleaned, fallback_decimal_separator, fallback_group_separator)
    if amount is None:
        return Result.fail(row_number, COL_SALARY, "Salary is not a valid decimal number.")
    try:
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return Result.fail(row_number, COL_SALARY, "Salary is too large for 7-character field.")
    if rounded < 0:
        return Result.fail(row_number, COL_SALARY, "Salary cannot be negative.")
    # -0.00 after rounding
    rounded = rounded.copy_abs()

    digits = f"{rounded:.2f}".replace(".", "")
    if len(digits) > SALARY_LENGTH:
        return Result.fail(row_number, COL_SALARY, "Salary is too large for 7-character field.")
    return Result.ok(format_field(digits, SALARY_LENGTH, Alignment.RIGHT, "0"))


def build_account(row_number: RowNumber, raw: str) -> Result[str]:
    account = (raw or "").strip()
    # Spreadsheet numeric-to-text artifact
    if account.endswith(".0"):
        account = account[:-2]
    if len(account) < 2:
        return Result.fail(
            row_number, COL_ACCOUNT,
            "Account number must have at least 2 characters before dropping the last character.",
        )
    # The trailing check character is not transmitted
    return Result.ok(account[:-1])


def build_quarter(row_number: RowNumber, raw: str) -> Result[str]:
    quarter = (raw or "").strip()
    if len(quarter) != QUARTER_LENGTH:
        return Result.fail(row_number, COL_QUARTER, "Trimestre must be exactly 3 characters after trimming.")
    return Result.ok(quarter)


def build_batch(row_number: RowNumber, raw: BatchNumber) -> Result[str]:
    batch = (raw or "").strip()
    if not batch:
        return Result.fail(row_number, COL_BATCH, "Batch number is required.")
    if len(batch) >= BATCH_LENGTH:
        return Result.ok(batch[-BATCH_LENGTH:])
    return Result.ok(format_field(batch, BATCH_LENGTH, Alignment.RIGHT, "0"))
