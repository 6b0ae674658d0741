"""Text offsets, ranges and line/column coordinates."""

from nopx.text.text import (
    LineColumn,
    LineIndex,
    LineSpan,
    TextRange,
    TextSize,
    slice_text_range,
)

__all__ = [
    "LineColumn",
    "LineIndex",
    "LineSpan",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
