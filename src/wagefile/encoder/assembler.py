"""Record assembler: one InputRow -> one 150-character EncodedRecord."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable

from wagefile.core.config import EncoderConfig
from wagefile.core.exceptions import InternalConsistencyError
from wagefile.core.result import Result
from wagefile.encoder.codec import format_field
from wagefile.encoder.fields import build_account, build_batch, build_quarter, build_salary, build_ssn
from wagefile.encoder.layout import RECORD_LAYOUT, RECORD_LENGTH, validate_layout
from wagefile.encoder.names import parse_name
from wagefile.models.input_row import InputRow
from wagefile.models.record import EncodedRecord, FieldSlot, FieldSource, FieldSpec

DATE_FORMAT = "%y%m%d"
TIME_FORMAT = "%H%M%S"


class RecordAssembler:
    """Encodes rows against a fixed layout table.

    The layout is validated once at construction; a row either encodes
    completely or yields the first validation issue found.
    """

    def __init__(
        self,
        layout: tuple[FieldSpec, ...] = RECORD_LAYOUT,
        config: EncoderConfig | None = None,
        record_length: int = RECORD_LENGTH,
    ) -> None:
        validate_layout(layout, record_length)
        self._layout = layout
        self._record_length = record_length
        self._config = config or EncoderConfig()

    @property
    def layout(self) -> tuple[FieldSpec, ...]:
        return self._layout

    def build(self, row: InputRow, now: datetime, batch_number: str) -> Result[EncodedRecord]:
        derived = self._derive(row, now, batch_number)
        if derived.issue is not None:
            return Result(issue=derived.issue)
        return Result.ok(self._render(row.row_number, derived.value))

    def _derive(self, row: InputRow, now: datetime, batch_number: str) -> Result[dict[FieldSource, str]]:
        n = row.row_number
        name = parse_name(n, row.full_name)
        if name.issue is not None:
            return Result(issue=name.issue)

        builders: tuple[tuple[FieldSource, Callable[[], Result[str]]], ...] = (
            (FieldSource.SSN, lambda: build_ssn(n, row.ssn)),
            (FieldSource.QUARTER, lambda: build_quarter(n, row.quarter_code)),
            (FieldSource.SALARY, lambda: build_salary(
                n, row.salary,
                self._config.fallback_decimal_separator,
                self._config.fallback_group_separator,
            )),
            (FieldSource.ACCOUNT, lambda: build_account(n, row.account_number)),
            (FieldSource.BATCH, lambda: build_batch(n, batch_number)),
        )

        parsed = name.value
        values: dict[FieldSource, str] = {
            FieldSource.FIRST_NAME: parsed.first,
            FieldSource.MIDDLE_INITIAL: parsed.middle_initial,
            FieldSource.PATERNAL_LAST_NAME: parsed.paternal_last_name,
            FieldSource.MATERNAL_LAST_NAME: parsed.maternal_last_name,
            FieldSource.DATE: now.strftime(DATE_FORMAT),
            FieldSource.TIME: now.strftime(TIME_FORMAT),
        }
        for source, build in builders:
            result = build()
            if result.issue is not None:
                return Result(issue=result.issue)
            values[source] = result.value
        return Result.ok(values)

    def _render(self, row_number: int, values: dict[FieldSource, str]) -> EncodedRecord:
        slots: list[FieldSlot] = []
        for spec in self._layout:
            if spec.is_literal:
                rendered = spec.literal
            else:
                rendered = format_field(values[spec.source], spec.length, spec.alignment, spec.pad_char)
            if len(rendered) != spec.length:
                raise InternalConsistencyError.length_mismatch(spec.index, len(rendered), spec.length)
            slots.append(FieldSlot(index=spec.index, expected_length=spec.length, rendered_value=rendered))

        line = "".join(slot.rendered_value for slot in slots)
        if len(line) != self._record_length:
            raise InternalConsistencyError.length_mismatch(None, len(line), self._record_length)
        return EncodedRecord(row_number=row_number, line=line, fields=tuple(slots))


def encode(
    row: InputRow, now: datetime, batch_number: str, assembler: RecordAssembler | None = None
) -> EncodedRecord:
    """Encode a single row, raising ``ValidationError`` on bad data."""
    return (assembler or RecordAssembler()).build(row, now, batch_number).unwrap()


def encode_batch(
    rows: Iterable[InputRow],
    now: datetime,
    batch_number: str,
    assembler: RecordAssembler | None = None,
) -> list[EncodedRecord]:
    """Encode rows in order with a shared timestamp; stops at the first bad row."""
    assembler = assembler or RecordAssembler()
    return [assembler.build(row, now, batch_number).unwrap() for row in rows]
