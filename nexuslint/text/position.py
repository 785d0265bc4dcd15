"""Line/column positions and the offset <-> position index."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Protocol

from nexuslint.text.text import TextRange


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line and column, the coordinates a host presents to users."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("Position line and column cannot be negative")


class PositionIndex(Protocol):
    """Translates character offsets into presentable coordinates.

    Hosts that address text in a different unit (UTF-16 code units, bytes)
    supply their own implementation; `LineIndex` is the default one.
    """

    @property
    def line_count(self) -> int: ...

    def offset_to_position(self, offset: int) -> Position: ...

    def position_to_offset(self, position: Position) -> int: ...

    def line_range(self, line: int) -> TextRange: ...


class LineIndex:
    """Position index built from a text snapshot.

    Recognises `\\n`, `\\r\\n` and a lone `\\r` as line breaks. Offsets past the
    end of the text clamp to the end of the last line.
    """

    def __init__(self, text: str) -> None:
        self._length = len(text)
        starts = [0]
        # (start, end) of each line, excluding its break
        spans: list[tuple[int, int]] = []
        index = 0
        while index < self._length:
            ch = text[index]
            if ch == "\n" or ch == "\r":
                spans.append((starts[-1], index))
                if ch == "\r" and index + 1 < self._length and text[index + 1] == "\n":
                    index += 1
                index += 1
                starts.append(index)
                continue
            index += 1
        spans.append((starts[-1], self._length))
        self._line_starts = starts
        self._line_spans = spans

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def offset_to_position(self, offset: int) -> Position:
        if offset < 0:
            raise ValueError(f"Offset cannot be negative: {offset}")
        offset = min(offset, self._length)
        line = bisect_right(self._line_starts, offset) - 1
        start, end = self._line_spans[line]
        # an offset inside a `\r\n` pair sits at the end of its line
        return Position(line, min(offset, end) - start)

    def position_to_offset(self, position: Position) -> int:
        start, end = self._line_spans[self._check_line(position.line)]
        return min(start + position.column, end)

    def line_range(self, line: int) -> TextRange:
        start, end = self._line_spans[self._check_line(line)]
        return TextRange.from_offsets(start, end)

    def _check_line(self, line: int) -> int:
        if not 0 <= line < len(self._line_spans):
            raise ValueError(f"Line {line} is outside the document (0..{len(self._line_spans) - 1})")
        return line
