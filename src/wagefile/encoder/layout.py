"""The 150-character employee wage record layout."""

from __future__ import annotations

from wagefile.core.exceptions import InternalConsistencyError
from wagefile.models.record import Alignment, FieldSource, FieldSpec

RECORD_LENGTH = 150


def _literal(index: int, value: str, description: str) -> FieldSpec:
    return FieldSpec(index=index, length=len(value), literal=value, description=description)


def _derived(
    index: int,
    length: int,
    source: FieldSource,
    description: str,
    alignment: Alignment = Alignment.LEFT,
    pad_char: str = " ",
) -> FieldSpec:
    return FieldSpec(
        index=index, length=length, source=source, description=description,
        alignment=alignment, pad_char=pad_char,
    )


RECORD_LAYOUT: tuple[FieldSpec, ...] = (
    _derived(1, 9, FieldSource.SSN, "SSN digits", Alignment.RIGHT, "0"),
    _literal(2, " ", "Filler"),
    _literal(3, "W4", "Record type"),
    _derived(4, 4, FieldSource.PATERNAL_LAST_NAME, "Paternal last name (short)"),
    _literal(5, "12345678", "Employer code"),
    _literal(6, "SWCA", "Program code"),
    _derived(7, 6, FieldSource.DATE, "Date yyMMdd"),
    _derived(8, 6, FieldSource.TIME, "Time HHmmss"),
    _derived(9, 3, FieldSource.QUARTER, "Quarter code"),
    _literal(10, "2", "Format marker"),
    _derived(11, 7, FieldSource.SALARY, "Salary in cents", Alignment.RIGHT, "0"),
    _derived(12, 9, FieldSource.ACCOUNT, "Employer account number"),
    _literal(13, "    ", "Filler"),
    _literal(14, "00000000", "Zero filler"),
    _literal(15, "  ", "Filler"),
    _literal(16, "1", "Format marker"),
    _derived(17, 6, FieldSource.BATCH, "Batch number", Alignment.RIGHT, "0"),
    _derived(18, 6, FieldSource.DATE, "Date yyMMdd (repeat)"),
    _literal(19, "000", "Zero filler"),
    _literal(20, "000", "Zero filler"),
    _literal(21, "04", "Format marker"),
    _derived(22, 16, FieldSource.FIRST_NAME, "First name"),
    _derived(23, 1, FieldSource.MIDDLE_INITIAL, "Middle initial"),
    _derived(24, 16, FieldSource.PATERNAL_LAST_NAME, "Paternal last name"),
    _derived(25, 16, FieldSource.MATERNAL_LAST_NAME, "Maternal last name"),
    _literal(26, "N", "Flag"),
    _literal(27, "     ", "Filler"),
)


def validate_layout(layout: tuple[FieldSpec, ...], record_length: int = RECORD_LENGTH) -> None:
    """Check that indices run 1..n in order and widths sum to ``record_length``."""
    for position, spec in enumerate(layout, start=1):
        if spec.index != position:
            raise InternalConsistencyError(
                f"Field {spec.index} is at position {position}.", spec.index
            )
        if spec.is_literal == (spec.source is not None):
            raise InternalConsistencyError(
                f"Field {spec.index} must have exactly one of literal or source.", spec.index
            )
        if spec.is_literal and len(spec.literal) != spec.length:
            raise InternalConsistencyError.length_mismatch(spec.index, len(spec.literal), spec.length)

    total = sum(spec.length for spec in layout)
    if total != record_length:
        raise InternalConsistencyError.length_mismatch(None, total, record_length)
