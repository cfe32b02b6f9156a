"""Local filesystem backend implementing IFileStore."""

from __future__ import annotations

import logging
from pathlib import Path

from wagefile.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class LocalFileStore:
    """IFileStore rooted at a local directory; paths are relative to the root."""

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self._root / path

    def read(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as exc:
            raise StorageError(f"Local read failed for {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Local write failed for {path!r}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(data), target)
        return str(target)
