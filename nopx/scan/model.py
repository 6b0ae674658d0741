"""Scanner inputs and results."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass, field

from nopx.convert import parse_magnitude
from nopx.matcher import PixelMatch

SourceText: TypeAlias = str | bytes
SourceLoader: TypeAlias = Callable[[], SourceText]


@dataclass(frozen=True, slots=True)
class PixelLiteral:
    """One pixel literal found in a source unit."""

    raw_value: str
    path: str
    line: int
    column: int
    context: str
    magnitude: float = field(init=False)

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError("PixelLiteral line/column are 1-indexed")
        object.__setattr__(self, "magnitude", parse_magnitude(self.raw_value))

    @staticmethod
    def from_match(match: PixelMatch, path: str) -> "PixelLiteral":
        return PixelLiteral(
            raw_value=match.raw_value,
            path=normalize_path(path),
            line=match.line,
            column=match.column,
            context=match.context,
        )

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.line, self.column)


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """One (path, text) corpus entry; `source` may defer reading to a loader."""

    path: str
    source: SourceText | SourceLoader

    def read_text(self) -> str:
        source = self.source() if callable(self.source) else self.source
        if isinstance(source, bytes):
            source = source.decode("utf-8")
        if not isinstance(source, str):
            raise TypeError(f"Expected str or bytes for {self.path}, got {type(source).__name__}")
        return source[1:] if source.startswith("\ufeff") else source


@dataclass(frozen=True, slots=True)
class SkippedSource:
    """A corpus entry the scanner could not read or convert."""

    path: str
    reason: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Flat scan output; a cancelled scan carries no literals."""

    literals: tuple[PixelLiteral, ...]
    skipped: tuple[SkippedSource, ...] = ()
    cancelled: bool = False

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(literal.path for literal in self.literals)


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")
