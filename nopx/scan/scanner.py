"""Corpus scanner: runs the matcher over many source units."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Iterable
import logging

from nopx.errors import InvalidMagnitude, UnreadableSource
from nopx.matcher import find_pixel_literals
from nopx.scan.model import (
    PixelLiteral,
    ScanResult,
    SkippedSource,
    SourceText,
    SourceUnit,
)
from nopx.scan.policy import IgnorePolicy

logger = logging.getLogger(__name__)

CorpusEntry: TypeAlias = SourceUnit | tuple[str, SourceText]


class CancellationToken:
    """Cooperative cancellation flag checked by the scanner between units."""

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


def scan(
    corpus: Iterable[CorpusEntry],
    policy: IgnorePolicy,
    *,
    cancellation: CancellationToken | None = None,
) -> ScanResult:
    """Collect every non-ignored pixel literal from `corpus`.

    Units that cannot be read, or that hold a literal too large to convert,
    are logged and skipped. When `cancellation` fires between units,
    everything gathered so far is dropped.
    """
    literals: list[PixelLiteral] = []
    skipped: list[SkippedSource] = []

    for entry in corpus:
        if cancellation is not None and cancellation.is_cancelled:
            logger.info("Scan cancelled; discarding partial results")
            return ScanResult(literals=(), skipped=(), cancelled=True)

        unit = as_source_unit(entry)
        try:
            found = scan_text(_read_unit(unit), unit.path, policy)
        except UnreadableSource as exc:
            logger.warning(f"Skipping {exc.path}: {exc.reason}")
            skipped.append(SkippedSource(path=exc.path, reason=exc.reason))
            continue
        except InvalidMagnitude as exc:
            logger.warning(f"Skipping {unit.path}: {exc}")
            skipped.append(SkippedSource(path=unit.path, reason=str(exc)))
            continue

        literals.extend(found)

    if cancellation is not None and cancellation.is_cancelled:
        logger.info("Scan cancelled; discarding partial results")
        return ScanResult(literals=(), skipped=(), cancelled=True)

    return ScanResult(literals=tuple(literals), skipped=tuple(skipped))


def scan_text(text: str, path: str, policy: IgnorePolicy) -> list[PixelLiteral]:
    """Literals of a single text snapshot, in (line, column) order."""
    found: list[PixelLiteral] = []
    for match in find_pixel_literals(text):
        literal = PixelLiteral.from_match(match, path)
        if policy.ignores(literal.raw_value, literal.magnitude):
            continue
        found.append(literal)
    return found


def as_source_unit(entry: CorpusEntry) -> SourceUnit:
    if isinstance(entry, SourceUnit):
        return entry
    path, source = entry
    return SourceUnit(path=path, source=source)


def _read_unit(unit: SourceUnit) -> str:
    try:
        return unit.read_text()
    except (OSError, UnicodeDecodeError, TypeError) as exc:
        raise UnreadableSource(unit.path, str(exc)) from exc
