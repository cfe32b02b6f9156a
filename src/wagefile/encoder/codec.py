"""Fixed-width field codec."""

from __future__ import annotations

from typing import Optional

from wagefile.models.record import Alignment


def format_field(value: Optional[str], width: int, alignment: Alignment, pad_char: str = " ") -> str:
    """Fit ``value`` into exactly ``width`` characters.

    Values longer than ``width`` are truncated to their first ``width``
    characters without error. Shorter values are padded with ``pad_char`` on
    the right (LEFT alignment) or on the left (RIGHT alignment).
    """
    normalized = value or ""
    if len(normalized) > width:
        return normalized[:width]
    if alignment == Alignment.LEFT:
        return normalized.ljust(width, pad_char)
    return normalized.rjust(width, pad_char)
