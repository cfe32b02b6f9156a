"""Tests for artifact rendering and output filename rules."""

from __future__ import annotations

import pytest

from wagefile.core.exceptions import WageFileError
from wagefile.output.artifact import output_filename, quarter_for_month, render_artifact


class TestRenderArtifact:
    def test_joins_with_crlf(self):
        assert render_artifact(["AAA", "BBB"]) == b"AAA\r\nBBB"

    def test_optional_trailing_crlf(self):
        assert render_artifact(["AAA", "BBB"], trailing_newline=True) == b"AAA\r\nBBB\r\n"

    def test_utf8_without_bom(self):
        data = render_artifact(["Ñ"])
        assert not data.startswith(b"\xef\xbb\xbf")
        assert data == "Ñ".encode("utf-8")

    def test_empty(self):
        assert render_artifact([]) == b""


class TestOutputFilename:
    def test_two_digit_year_and_quarter(self):
        assert output_filename(2025, 3) == "Wages253.txt"

    def test_year_is_zero_padded(self):
        assert output_filename(2005, 1) == "Wages051.txt"

    @pytest.mark.parametrize("quarter", [0, 5, -1])
    def test_invalid_quarter(self, quarter):
        with pytest.raises(WageFileError):
            output_filename(2025, quarter)


@pytest.mark.parametrize(
    ("month", "quarter"), [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4), (12, 4)],
)
def test_quarter_for_month(month, quarter):
    assert quarter_for_month(month) == quarter


def test_quarter_for_invalid_month():
    with pytest.raises(WageFileError):
        quarter_for_month(13)
