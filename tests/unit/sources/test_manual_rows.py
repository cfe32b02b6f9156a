"""Tests for manual-entry rows and row construction."""

from __future__ import annotations

import pytest

from wagefile.core.exceptions import ValidationError
from wagefile.core.protocols import IRowSource
from wagefile.models.input_row import COL_ACCOUNT, COL_FULL_NAME, COL_QUARTER, COL_SALARY, COL_SSN
from wagefile.sources.rows import ManualRowSource, make_row

FULL = {
    COL_FULL_NAME: "Ana Torres",
    COL_SSN: "123456789",
    COL_SALARY: "100",
    COL_ACCOUNT: "12345",
    COL_QUARTER: "001",
}


class TestMakeRow:
    def test_builds_trimmed_row(self):
        row = make_row(5, {**FULL, COL_FULL_NAME: "  Ana Torres  "})
        assert row.row_number == 5
        assert row.full_name == "Ana Torres"
        assert row.account_number == "12345"

    def test_blank_row_is_skipped(self):
        assert make_row(5, {c: "  " for c in FULL}) is None

    def test_missing_field_in_non_blank_row_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            make_row(8, {**FULL, COL_SALARY: ""})
        assert exc_info.value.row_number == 8
        assert exc_info.value.field == COL_SALARY
        assert exc_info.value.message == "Field is required."


class TestManualRowSource:
    def test_is_a_row_source(self):
        assert isinstance(ManualRowSource([]), IRowSource)

    def test_numbers_rows_from_two_and_skips_blanks(self):
        source = ManualRowSource([FULL, {}, {**FULL, COL_SSN: "987654321"}])
        rows = source.rows()
        assert [r.row_number for r in rows] == [2, 4]
        assert rows[1].ssn == "987654321"

    def test_accepts_attribute_names(self):
        rows = ManualRowSource([{
            "full_name": "Ana Torres", "ssn": "1", "salary": "2",
            "account_number": "34", "quarter_code": "001",
        }]).rows()
        assert rows[0].quarter_code == "001"

    def test_non_string_values_are_stringified(self):
        rows = ManualRowSource([{**FULL, COL_SALARY: 1234.5}]).rows()
        assert rows[0].salary == "1234.5"
