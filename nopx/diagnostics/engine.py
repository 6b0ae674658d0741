"""Per-document diagnostic state for inline px warnings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import TYPE_CHECKING

from nopx.convert import to_rem
from nopx.diagnostics.codes import DIAGNOSTIC_SOURCE, PX_TO_REM
from nopx.diagnostics.diagnostic import Diagnostic
from nopx.document import DocumentSnapshot
from nopx.errors import InvalidMagnitude
from nopx.matcher import find_pixel_literals
from nopx.scan import PixelLiteral
from nopx.text import LineSpan, TextRange

if TYPE_CHECKING:
    from nopx.config import NoPxOptions

logger = logging.getLogger(__name__)


class DocumentState(StrEnum):
    ABSENT = "absent"
    COMPUTED = "computed"


@dataclass(frozen=True, slots=True)
class DiagnosticUpdate:
    """Outcome of one recomputation; `diagnostics is None` clears the document."""

    uri: str
    version: int | None
    diagnostics: tuple[Diagnostic, ...] | None


def compute_diagnostics(
    text: str,
    options: NoPxOptions,
    *,
    source: str = DIAGNOSTIC_SOURCE,
) -> tuple[Diagnostic, ...]:
    """Diagnostics for every non-ignored pixel literal of `text`.

    A literal whose magnitude does not fit a float has no rem suggestion and
    is left out.
    """
    policy = options.ignore_policy()
    severity = options.severity
    diagnostics: list[Diagnostic] = []
    for match in find_pixel_literals(text):
        try:
            literal = PixelLiteral(
                raw_value=match.raw_value,
                path="",
                line=match.line,
                column=match.column,
                context=match.context,
            )
        except InvalidMagnitude:
            logger.debug(f"No diagnostic for oversized literal at {match.line}:{match.column}")
            continue
        if policy.ignores(literal.raw_value, literal.magnitude):
            continue
        suggestion = to_rem(literal.magnitude, options.base_font_size)
        diagnostics.append(
            Diagnostic(
                code=PX_TO_REM.code,
                message=f"{PX_TO_REM.message} Suggestion: {suggestion}",
                range=TextRange(match.offset, match.end_offset),
                span=LineSpan.on_line(match.line, match.column, len(match.raw_value)),
                source=source,
                severity=severity,
                hint=PX_TO_REM.hint,
                category=PX_TO_REM.category,
                tags=("unnecessary",),
            )
        )
    return tuple(diagnostics)


class DiagnosticEngine:
    """Owns the document -> diagnostics mapping.

    Each document is either absent or holds the full set computed from its
    latest committed snapshot. Sets are replaced wholesale, never patched.
    A result computed from an older version than the one already committed
    is dropped.
    """

    def __init__(self, *, source: str = DIAGNOSTIC_SOURCE) -> None:
        self._source = source
        self._diagnostics: dict[str, tuple[Diagnostic, ...]] = {}
        self._versions: dict[str, int] = {}

    def compute(self, document: DocumentSnapshot, options: NoPxOptions) -> DiagnosticUpdate:
        if not options.enable_inline_diagnostics or not options.is_supported_path(document.uri):
            return DiagnosticUpdate(uri=document.uri, version=document.version, diagnostics=None)
        return DiagnosticUpdate(
            uri=document.uri,
            version=document.version,
            diagnostics=compute_diagnostics(document.text, options, source=self._source),
        )

    def commit(self, update: DiagnosticUpdate) -> tuple[Diagnostic, ...]:
        """Store `update` unless a newer version was already committed."""
        latest = self._versions.get(update.uri)
        if update.version is not None and latest is not None and update.version < latest:
            logger.debug(f"Dropping stale diagnostics for {update.uri} (v{update.version} < v{latest})")
            return self.get(update.uri)

        if update.version is not None:
            self._versions[update.uri] = update.version

        if update.diagnostics is None:
            if self._diagnostics.pop(update.uri, None) is not None:
                logger.debug(f"Cleared diagnostics for {update.uri}")
            return ()

        self._diagnostics[update.uri] = update.diagnostics
        return update.diagnostics

    def update(self, document: DocumentSnapshot, options: NoPxOptions) -> tuple[Diagnostic, ...]:
        return self.commit(self.compute(document, options))

    def state(self, uri: str) -> DocumentState:
        return DocumentState.COMPUTED if uri in self._diagnostics else DocumentState.ABSENT

    def get(self, uri: str) -> tuple[Diagnostic, ...]:
        return self._diagnostics.get(uri, ())

    def documents(self) -> tuple[str, ...]:
        return tuple(sorted(self._diagnostics))

    def clear(self, uri: str) -> None:
        self._diagnostics.pop(uri, None)
        self._versions.pop(uri, None)

    def dispose(self) -> None:
        self._diagnostics.clear()
        self._versions.clear()
