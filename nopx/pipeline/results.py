"""Pipeline run result carriers for host entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from nopx.diagnostics import Diagnostic
from nopx.edit import EditPlan
from nopx.scan import PixelLiteral, SkippedSource
from nopx.tree import FolderNode


@dataclass(frozen=True, slots=True)
class ScanRunResult:
    """Result of scanning a corpus and grouping what was found."""

    literals: tuple[PixelLiteral, ...]
    tree: tuple[FolderNode, ...]
    skipped: tuple[SkippedSource, ...]
    cancelled: bool


@dataclass(frozen=True, slots=True)
class DiagnosticsRunResult:
    """Diagnostics committed for one document after an open/change event."""

    uri: str
    diagnostics: tuple[Diagnostic, ...]
    has_errors: bool


@dataclass(frozen=True, slots=True)
class ConvertRunResult:
    """Result of planning and applying px -> rem edits to one snapshot."""

    plan: EditPlan
    text: str
    changed: bool

    @property
    def converted_count(self) -> int:
        return len(self.plan.edits)
