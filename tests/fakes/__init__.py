"""Shared test doubles and row factories."""

from __future__ import annotations

from typing import Any

from wagefile.models.input_row import InputRow
from wagefile.persistence.memory_backend import MemoryFileStore


def make_input_row(**overrides: Any) -> InputRow:
    """A valid four-token employee row; override any field."""
    values: dict[str, Any] = {
        "row_number": 2,
        "full_name": "Juan Carlos Perez Lopez",
        "ssn": "123-45-6789",
        "salary": "1234.56",
        "account_number": "1234567890",
        "quarter_code": "001",
    }
    values.update(overrides)
    return InputRow(**values)


__all__ = ["MemoryFileStore", "make_input_row"]
