"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from nopx.diagnostics.diagnostic import Severity

DIAGNOSTIC_SOURCE: Final[str] = "noPxInCss"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None


PX_TO_REM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="px-to-rem",
    message="Consider using rem instead of px.",
    hint="Use the quick fix to convert this value, or convert the whole file.",
    severity="warning",
    category="units",
)
