"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from nopx.diagnostics.codes import DIAGNOSTIC_SOURCE, PX_TO_REM
from nopx.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def filter_own_diagnostics(
    diagnostics: Iterable[Diagnostic],
    *,
    source: str = DIAGNOSTIC_SOURCE,
    code: str = PX_TO_REM.code,
) -> list[Diagnostic]:
    """Keep only diagnostics carrying the given `(source, code)` tag pair."""
    return [d for d in diagnostics if d.source == source and d.code == code]
