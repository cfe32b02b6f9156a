"""WageFileGenerator: preview and generate the quarterly wage submission file."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from wagefile.core.config import AppSettings
from wagefile.core.exceptions import ValidationError, WageFileError
from wagefile.core.protocols import IFileStore
from wagefile.encoder.assembler import RecordAssembler, encode_batch
from wagefile.models.input_row import InputRow
from wagefile.models.record import EncodedRecord
from wagefile.output.artifact import CONTENT_TYPE, output_filename, render_artifact

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
    """Where the artifact went and what it holds."""

    path: str
    filename: str
    record_count: int
    size_bytes: int


class WageFileGenerator:
    """Encodes employee rows and writes the submission artifact to a file store."""

    def __init__(
        self,
        *,
        file_store: IFileStore,
        settings: AppSettings | None = None,
        assembler: RecordAssembler | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._store = file_store
        self._assembler = assembler or RecordAssembler(config=self._settings.encoder)

    def preview(self, rows: Sequence[InputRow], now: datetime, batch_number: str) -> EncodedRecord:
        """Encode the first row only, for review before generating."""
        if not rows:
            raise WageFileError("No non-empty employee rows found.")
        result = self._assembler.build(rows[0], now, batch_number)
        if result.issue is not None:
            logger.warning("Preview failed: row %d, field %s", result.issue.row_number, result.issue.field)
        record = result.unwrap()
        logger.info("Preview generated for row %d", record.row_number)
        return record

    def generate(
        self,
        rows: Sequence[InputRow],
        now: datetime,
        batch_number: str,
        year: int,
        quarter: int,
        trailing_newline: bool | None = None,
    ) -> GenerationResult:
        """Encode every row and write ``WagesYYQ.txt``; nothing is written on a bad row."""
        if not rows:
            raise WageFileError("No non-empty employee rows found.")
        filename = output_filename(year, quarter)
        if trailing_newline is None:
            trailing_newline = self._settings.output.trailing_newline

        try:
            records = encode_batch(rows, now, batch_number, self._assembler)
        except ValidationError as exc:
            logger.warning("Generation stopped: row %d, field %s", exc.row_number, exc.field)
            raise

        data = render_artifact((r.line for r in records), trailing_newline=trailing_newline)
        path = self._store.write(filename, data, content_type=CONTENT_TYPE)
        logger.info("Generated %d records at %s", len(records), path)
        return GenerationResult(
            path=path, filename=filename, record_count=len(records), size_bytes=len(data),
        )
