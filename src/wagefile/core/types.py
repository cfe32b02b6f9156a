"""Type aliases used across wagefile."""

from __future__ import annotations

RowNumber = int
BatchNumber = str
