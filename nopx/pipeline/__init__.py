"""Host-facing entrypoints and their result carriers."""

from nopx.pipeline.entrypoints import (
    run_convert,
    run_convert_literal,
    run_diagnostics,
    run_scan,
    run_will_save,
)
from nopx.pipeline.results import ConvertRunResult, DiagnosticsRunResult, ScanRunResult

__all__ = [
    "ConvertRunResult",
    "DiagnosticsRunResult",
    "ScanRunResult",
    "run_convert",
    "run_convert_literal",
    "run_diagnostics",
    "run_scan",
    "run_will_save",
]
