"""Tests for the record assembler."""

from __future__ import annotations

from datetime import datetime

import pytest

from tests.fakes import make_input_row
from wagefile.core.config import EncoderConfig
from wagefile.core.exceptions import InternalConsistencyError, ValidationError
from wagefile.encoder.assembler import RecordAssembler, encode, encode_batch
from wagefile.encoder.layout import RECORD_LAYOUT
from wagefile.models.record import FieldSource, FieldSpec

NOW = datetime(2025, 7, 15, 9, 30, 5)

EXPECTED_PARTS = [
    "123456789", " ", "W4", "PERE", "12345678", "SWCA", "250715", "093005", "001", "2",
    "0123456", "123456789", "    ", "00000000", "  ", "1", "000007", "250715", "000", "000",
    "04", "JUAN".ljust(16), "C", "PEREZ".ljust(16), "LOPEZ".ljust(16), "N", "     ",
]


@pytest.fixture
def assembler():
    return RecordAssembler()


class TestBuild:
    def test_full_line_matches_layout(self, assembler):
        record = assembler.build(make_input_row(), NOW, "7").unwrap()
        assert record.line == "".join(EXPECTED_PARTS)
        assert len(record.line) == 150

    def test_audit_trail_has_27_slots_in_order(self, assembler):
        record = assembler.build(make_input_row(), NOW, "7").unwrap()
        assert [slot.index for slot in record.fields] == list(range(1, 28))
        assert [slot.rendered_value for slot in record.fields] == EXPECTED_PARTS

    def test_every_slot_has_expected_length(self, assembler):
        record = assembler.build(make_input_row(full_name="ana torres"), NOW, "12345678").unwrap()
        for slot in record.fields:
            assert slot.actual_length == slot.expected_length

    def test_row_number_is_kept(self, assembler):
        record = assembler.build(make_input_row(row_number=11), NOW, "7").unwrap()
        assert record.row_number == 11

    def test_two_token_name_fields(self, assembler):
        record = assembler.build(make_input_row(full_name="Ana Torres"), NOW, "7").unwrap()
        slots = {slot.index: slot.rendered_value for slot in record.fields}
        assert slots[4] == "TORR"
        assert slots[22] == "ANA".ljust(16)
        assert slots[23] == " "
        assert slots[24] == "TORRES".ljust(16)
        assert slots[25] == " " * 16

    def test_long_names_truncate_to_field_width(self, assembler):
        record = assembler.build(
            make_input_row(full_name="Maximiliano Xavier Montenegrosalazar Villavicencioortiz"), NOW, "7",
        ).unwrap()
        slots = {slot.index: slot.rendered_value for slot in record.fields}
        assert slots[22] == "MAXIMILIANO     "
        assert slots[24] == "MONTENEGROSALAZA"
        assert slots[25] == "VILLAVICENCIOORT"
        assert len(record.line) == 150

    def test_account_with_spreadsheet_artifact(self, assembler):
        record = assembler.build(make_input_row(account_number="123456789.0"), NOW, "7").unwrap()
        assert record.fields[11].rendered_value == "12345678 "

    def test_dates_use_shared_timestamp(self, assembler):
        record = assembler.build(make_input_row(), datetime(2024, 1, 2, 23, 4, 5), "7").unwrap()
        assert record.fields[6].rendered_value == "240102"
        assert record.fields[7].rendered_value == "230405"
        assert record.fields[17].rendered_value == "240102"


class TestValidation:
    def test_bad_ssn_reports_row_and_column(self, assembler):
        result = assembler.build(make_input_row(row_number=6, ssn="abc"), NOW, "7")
        assert result.issue is not None
        assert result.issue.row_number == 6
        assert result.issue.field == "SSN"

    def test_name_is_checked_first(self, assembler):
        result = assembler.build(make_input_row(full_name="X", ssn="abc"), NOW, "7")
        assert result.issue.field == "FULL_NAME"

    def test_missing_batch(self, assembler):
        result = assembler.build(make_input_row(), NOW, " ")
        assert result.issue.field == "Batch Number (6)"

    def test_encoder_config_drives_salary_fallback(self):
        assembler = RecordAssembler(config=EncoderConfig(
            fallback_decimal_separator=";", fallback_group_separator="'",
        ))
        record = assembler.build(make_input_row(salary="1'234;56"), NOW, "7").unwrap()
        assert record.fields[10].rendered_value == "0123456"


class TestInternalConsistency:
    def test_rejects_invalid_layout_at_construction(self):
        with pytest.raises(InternalConsistencyError):
            RecordAssembler(layout=RECORD_LAYOUT[:-2])

    def test_literal_length_mismatch_is_not_a_validation_issue(self):
        assembler = RecordAssembler()
        # Bypass construction-time validation to simulate a corrupted table
        broken = FieldSpec.model_construct(index=27, length=5, literal="  ", source=None)
        assembler._layout = RECORD_LAYOUT[:-1] + (broken,)
        with pytest.raises(InternalConsistencyError):
            assembler.build(make_input_row(), NOW, "7")


class TestEncodeHelpers:
    def test_encode_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            encode(make_input_row(row_number=3, ssn="abc"), NOW, "7")
        assert str(exc_info.value).startswith("Row 3, Column 'SSN'")

    def test_encode_batch_preserves_order(self):
        rows = [make_input_row(row_number=n, ssn=f"{n:09d}") for n in (2, 3, 4)]
        records = encode_batch(rows, NOW, "7")
        assert [r.row_number for r in records] == [2, 3, 4]
        assert [r.line[:9] for r in records] == ["000000002", "000000003", "000000004"]

    def test_encode_batch_stops_at_first_bad_row(self):
        rows = [
            make_input_row(row_number=2),
            make_input_row(row_number=3, salary="oops"),
            make_input_row(row_number=4, ssn="abc"),
        ]
        with pytest.raises(ValidationError) as exc_info:
            encode_batch(rows, NOW, "7")
        assert exc_info.value.row_number == 3
        assert exc_info.value.field == "SALARY"


def test_derived_sources_cover_layout():
    sources = {spec.source for spec in RECORD_LAYOUT if spec.source is not None}
    assert sources == set(FieldSource)
