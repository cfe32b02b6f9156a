"""Protocol interfaces for wagefile collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from wagefile.models.input_row import InputRow


# ---------------------------------------------------------------------------
# Row Source
# ---------------------------------------------------------------------------

@runtime_checkable
class IRowSource(Protocol):
    """Produces employee rows in stable order with blank rows removed."""

    def rows(self) -> list[InputRow]: ...


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Output storage interface (local directory, S3, memory)."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str: ...
