"""In-memory file store for unit tests, a dict-backed fake."""

from __future__ import annotations

from wagefile.core.exceptions import StorageError


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise StorageError(f"No such file: {path!r}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        self._files[path] = data
        self.content_types[path] = content_type
        return path
