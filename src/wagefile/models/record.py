"""Record layout and encoded record models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class Alignment(StrEnum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class FieldSource(StrEnum):
    """Derived values a layout field can be filled from."""

    SSN = "SSN"
    DATE = "DATE"
    TIME = "TIME"
    QUARTER = "QUARTER"
    SALARY = "SALARY"
    ACCOUNT = "ACCOUNT"
    BATCH = "BATCH"
    FIRST_NAME = "FIRST_NAME"
    MIDDLE_INITIAL = "MIDDLE_INITIAL"
    PATERNAL_LAST_NAME = "PATERNAL_LAST_NAME"
    MATERNAL_LAST_NAME = "MATERNAL_LAST_NAME"


class ParsedName(BaseModel):
    """Full name split according to the two-surname convention."""

    model_config = {"frozen": True}

    first: str
    middle_initial: str = " "
    paternal_last_name: str
    maternal_last_name: str = ""


class FieldSpec(BaseModel):
    """One positional field of the record layout.

    Exactly one of ``literal`` or ``source`` is set.
    """

    model_config = {"frozen": True}

    index: int
    length: int = Field(gt=0)
    description: str = ""
    literal: Optional[str] = None
    source: Optional[FieldSource] = None
    alignment: Alignment = Alignment.LEFT
    pad_char: str = " "

    @property
    def is_literal(self) -> bool:
        return self.literal is not None


class FieldSlot(BaseModel):
    """A rendered field, kept for the preview audit trail."""

    model_config = {"frozen": True}

    index: int
    expected_length: int
    rendered_value: str

    @property
    def actual_length(self) -> int:
        return len(self.rendered_value)


class EncodedRecord(BaseModel):
    """Final fixed-width line for one employee plus its field breakdown."""

    model_config = {"frozen": True}

    row_number: int
    line: str
    fields: tuple[FieldSlot, ...] = ()
