"""Text offsets, ranges and line/column positions."""

from nexuslint.text.position import LineIndex, Position, PositionIndex
from nexuslint.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineIndex",
    "Position",
    "PositionIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
