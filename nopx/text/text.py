from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's length."""
        return TextSize(len(text))

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def up_to(end: TextSize) -> "TextRange":
        """Create a TextRange from 0 up to the given end offset."""
        return TextRange(0, end.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        """Get the length of the range as a TextSize."""
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self._start <= other._start and other._end <= self._end

    def ordering(self, other: "TextRange") -> Literal[-1, 0, 1]:
        """Compare this range to another range for ordering.

        Returns:
        - -1 if this range is before the other range
        - 0 if the ranges overlap
        - 1 if this range is after the other range
        """
        if self._end <= other._start:
            return -1
        elif other._end <= self._start:
            return 1
        else:
            return 0

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True, order=True)
class LineColumn:
    """1-indexed line/column position, the way editors and humans count."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("LineColumn positions are 1-indexed")

    def __repr__(self) -> str:
        return f"LineColumn({self.line}:{self.column})"


@dataclass(frozen=True, slots=True, order=True)
class LineSpan:
    """Span between two LineColumn positions; `end` is exclusive."""

    start: LineColumn
    end: LineColumn

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError("LineSpan invariant violated: start > end")

    @staticmethod
    def on_line(line: int, column: int, length: int) -> "LineSpan":
        """Create a single-line span of `length` characters starting at `column`."""
        return LineSpan(LineColumn(line, column), LineColumn(line, column + length))

    def __repr__(self) -> str:
        return f"LineSpan({self.start.line}:{self.start.column}-{self.end.line}:{self.end.column})"


class LineIndex:
    """Maps between absolute offsets and line/column positions of one text snapshot.

    Lines are split on `\\n` only; a `\\r` before it counts as a regular
    character of the line.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, text: str) -> None:
        starts = [0]
        position = text.find("\n")
        while position != -1:
            starts.append(position + 1)
            position = text.find("\n", position + 1)
        self._line_starts = tuple(starts)
        self._length = len(text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_range(self, line: int) -> TextRange:
        """Offsets of `line` (1-indexed) without its terminating newline."""
        if not 1 <= line <= len(self._line_starts):
            raise ValueError(f"Line {line} is outside the text (1..{len(self._line_starts)})")
        start = self._line_starts[line - 1]
        if line < len(self._line_starts):
            end = self._line_starts[line] - 1
        else:
            end = self._length
        return TextRange(start, end)

    def offset_of(self, position: LineColumn) -> TextSize:
        """Absolute offset of `position`; the column may point one past the line end."""
        line_range = self.line_range(position.line)
        offset = line_range.start.value + position.column - 1
        if offset > line_range.end.value:
            raise ValueError(f"Column {position.column} is outside line {position.line}")
        return TextSize(offset)

    def position_of(self, offset: TextSize) -> LineColumn:
        if offset.value > self._length:
            raise ValueError(f"Offset {offset.value} is outside the text (0..{self._length})")
        low, high = 0, len(self._line_starts) - 1
        while low < high:
            middle = (low + high + 1) // 2
            if self._line_starts[middle] <= offset.value:
                low = middle
            else:
                high = middle - 1
        return LineColumn(low + 1, offset.value - self._line_starts[low] + 1)

    def range_of(self, span: LineSpan) -> TextRange:
        return TextRange.new(self.offset_of(span.start), self.offset_of(span.end))
