"""Result type returned by field builders and the record assembler.

A builder either produces a value or a ``ValidationIssue`` describing why the
row cannot be encoded. Callers that want exceptions use ``unwrap()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from wagefile.core.exceptions import ValidationError

T = TypeVar("T")


class ValidationIssue(BaseModel):
    """A user-data defect located by row and column."""

    model_config = {"frozen": True}

    row_number: int
    field: str
    message: str

    def to_exception(self) -> ValidationError:
        return ValidationError(self.row_number, self.field, self.message)

    def __str__(self) -> str:
        return f"Row {self.row_number}, Column '{self.field}': {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a validation issue, never both."""

    value: T | None = None
    issue: ValidationIssue | None = None

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, row_number: int, field: str, message: str) -> Result[T]:
        return cls(issue=ValidationIssue(row_number=row_number, field=field, message=message))

    @property
    def is_ok(self) -> bool:
        return self.issue is None

    def unwrap(self) -> T:
        """Return the value or raise the issue as ``ValidationError``."""
        if self.issue is not None:
            raise self.issue.to_exception()
        return self.value  # type: ignore[return-value]
