"""Tests for the fixed-width field codec."""

from __future__ import annotations

from wagefile.encoder.codec import format_field
from wagefile.models.record import Alignment


class TestFormatField:
    def test_left_alignment_pads_right(self):
        assert format_field("ABC", 6, Alignment.LEFT, " ") == "ABC   "

    def test_right_alignment_pads_left(self):
        assert format_field("42", 5, Alignment.RIGHT, "0") == "00042"

    def test_exact_width_unchanged(self):
        assert format_field("W4", 2, Alignment.LEFT) == "W4"

    def test_longer_value_is_truncated_silently(self):
        assert format_field("HERNANDEZ", 4, Alignment.LEFT, " ") == "HERN"
        assert format_field("123456", 3, Alignment.RIGHT, "0") == "123"

    def test_none_becomes_padding(self):
        assert format_field(None, 3, Alignment.LEFT, " ") == "   "

    def test_empty_right_aligned(self):
        assert format_field("", 4, Alignment.RIGHT, "0") == "0000"
