"""wagefile exception hierarchy."""

from __future__ import annotations


class WageFileError(Exception):
    """Base exception for all wagefile errors."""


class ValidationError(WageFileError):
    """A row carries data that cannot be encoded."""

    def __init__(self, row_number: int, field: str, message: str) -> None:
        self.row_number = row_number
        self.field = field
        self.message = message
        super().__init__(f"Row {row_number}, Column '{field}': {message}")


class InternalConsistencyError(WageFileError):
    """A rendered field or line does not match the record layout.

    Raised for broken builder/codec contracts, never for bad user data.
    """

    def __init__(self, message: str, field_index: int | None = None) -> None:
        self.field_index = field_index
        super().__init__(message)

    @classmethod
    def length_mismatch(
        cls, field_index: int | None, actual: int, expected: int
    ) -> InternalConsistencyError:
        where = "Record line" if field_index is None else f"Field {field_index}"
        return cls(f"{where} has length {actual}; expected {expected}.", field_index)


class SpreadsheetError(WageFileError):
    """Workbook could not be read or is missing required columns."""


class StorageError(WageFileError):
    """File-store backend operation failed."""
