"""Diagnostics."""

from nopx.diagnostics.codes import DIAGNOSTIC_SOURCE, PX_TO_REM, DiagnosticSpec
from nopx.diagnostics.diagnostic import (
    DEFAULT_SEVERITY,
    Diagnostic,
    DiagnosticTag,
    Severity,
    resolve_severity,
)
from nopx.diagnostics.report import filter_own_diagnostics, has_errors

__all__ = [
    "DEFAULT_SEVERITY",
    "DIAGNOSTIC_SOURCE",
    "PX_TO_REM",
    "Diagnostic",
    "DiagnosticSpec",
    "DiagnosticTag",
    "Severity",
    "filter_own_diagnostics",
    "has_errors",
    "resolve_severity",
]
