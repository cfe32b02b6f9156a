"""Record preview and file generation endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from wagefile.models.input_row import InputRow
from wagefile.models.record import EncodedRecord
from wagefile.output.artifact import quarter_for_month
from wagefile.services.generator import GenerationResult, WageFileGenerator
from wagefile.sources.rows import ManualRowSource

router = APIRouter(tags=["records"])


class RowPayload(BaseModel):
    """One manually entered employee row."""

    full_name: str = ""
    ssn: str = ""
    salary: str = ""
    account_number: str = ""
    quarter_code: str = ""


class PreviewRequest(BaseModel):
    batch_number: str
    rows: list[RowPayload] = Field(default_factory=list)
    timestamp: Optional[datetime] = None


class GenerateRequest(PreviewRequest):
    year: Optional[int] = None
    quarter: Optional[int] = None
    trailing_newline: Optional[bool] = None


def get_generator(request: Request) -> WageFileGenerator:
    return request.app.state.generator


def _rows(payload: PreviewRequest) -> list[InputRow]:
    return ManualRowSource([row.model_dump() for row in payload.rows]).rows()


@router.post("/preview", response_model=EncodedRecord)
def preview(
    payload: PreviewRequest, generator: WageFileGenerator = Depends(get_generator)
) -> EncodedRecord:
    """Encode the first non-blank row and return its field breakdown."""
    now = payload.timestamp or datetime.now()
    return generator.preview(_rows(payload), now, payload.batch_number)


@router.post("/generate", response_model=GenerationResult)
def generate(
    payload: GenerateRequest, generator: WageFileGenerator = Depends(get_generator)
) -> GenerationResult:
    """Encode every row and write the quarterly submission file."""
    now = payload.timestamp or datetime.now()
    return generator.generate(
        _rows(payload),
        now,
        payload.batch_number,
        year=payload.year if payload.year is not None else now.year,
        quarter=payload.quarter if payload.quarter is not None else quarter_for_month(now.month),
        trailing_newline=payload.trailing_newline,
    )
