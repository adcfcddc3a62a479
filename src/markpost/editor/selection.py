"""Selection ranges and flat-offset <-> (row, column) conversions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Location = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Half-open ``[start, end)`` span of offsets into a text buffer.

    ``start == end`` describes a caret.
    """

    start: int
    end: int

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    def clamp(self, length: int) -> "SelectionRange":
        """Return the range pinned to ``[0, length]`` with ``start <= end``."""

        start = max(0, min(self.start, length))
        end = max(0, min(self.end, length))
        if start > end:
            start, end = end, start
        return SelectionRange(start, end)


def offset_for_location(text: str, location: Location) -> int:
    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    offset += max(0, min(col, len(lines[row])))
    return offset


def location_for_offset(text: str, offset: int) -> Location:
    lines = text.split("\n")
    offset = max(0, min(offset, len(text)))
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, offset - running)
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))


__all__ = [
    "Location",
    "SelectionRange",
    "offset_for_location",
    "location_for_offset",
]
