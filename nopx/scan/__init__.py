"""Corpus scanning and ignore policies."""

from nopx.scan.model import (
    PixelLiteral,
    ScanResult,
    SkippedSource,
    SourceUnit,
    normalize_path,
)
from nopx.scan.policy import KEEP_ALL, IgnoreKind, IgnorePolicy
from nopx.scan.scanner import (
    CancellationToken,
    CorpusEntry,
    as_source_unit,
    scan,
    scan_text,
)

__all__ = [
    "KEEP_ALL",
    "CancellationToken",
    "CorpusEntry",
    "IgnoreKind",
    "IgnorePolicy",
    "PixelLiteral",
    "ScanResult",
    "SkippedSource",
    "SourceUnit",
    "as_source_unit",
    "normalize_path",
    "scan",
    "scan_text",
]
