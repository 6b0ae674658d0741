"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Final, Literal

from nopx.text import LineSpan, TextRange

Severity = Literal["error", "warning", "information"]
DiagnosticTag = Literal["unnecessary"]

DEFAULT_SEVERITY: Final[Severity] = "warning"

_SEVERITIES: Final[dict[str, Severity]] = {
    "error": "error",
    "warning": "warning",
    "information": "information",
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Location-anchored finding; `(source, code)` identifies who emitted it."""

    code: str
    message: str
    range: TextRange
    span: LineSpan
    source: str
    severity: Severity = DEFAULT_SEVERITY
    hint: str | None = None
    category: str | None = None
    tags: tuple[DiagnosticTag, ...] = ()


def resolve_severity(name: str) -> Severity:
    """Map a configured severity name to a Severity; unknown names become warnings."""
    return _SEVERITIES.get(name.strip().lower(), DEFAULT_SEVERITY)
