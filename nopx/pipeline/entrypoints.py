"""Entrypoints wiring scanner, diagnostics and edits for a host."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from tqdm import tqdm

from nopx.config import NoPxOptions
from nopx.diagnostics import has_errors
from nopx.diagnostics.engine import DiagnosticEngine
from nopx.document import DocumentSnapshot
from nopx.edit import EditPlan, apply_edit_plan, plan_batch, plan_for_literal
from nopx.pipeline.results import ConvertRunResult, DiagnosticsRunResult, ScanRunResult
from nopx.scan import CancellationToken, CorpusEntry, PixelLiteral, as_source_unit, scan
from nopx.tree import group_literals

logger = logging.getLogger(__name__)


def run_scan(
    corpus: Iterable[CorpusEntry],
    options: NoPxOptions | None = None,
    *,
    cancellation: CancellationToken | None = None,
    show_progress: bool = False,
) -> ScanRunResult:
    """Scan supported entries of `corpus` and group the results into a tree."""
    resolved_options = _resolve_options(options)
    units = [unit for unit in map(as_source_unit, corpus) if resolved_options.is_supported_path(unit.path)]
    iterator = tqdm(units, desc="Scanning", unit="file") if show_progress else units

    result = scan(iterator, resolved_options.ignore_policy(), cancellation=cancellation)
    if result.skipped:
        logger.warning(f"Skipped {len(result.skipped)} unreadable file(s)")
    return ScanRunResult(
        literals=result.literals,
        tree=group_literals(result.literals),
        skipped=result.skipped,
        cancelled=result.cancelled,
    )


def run_diagnostics(
    engine: DiagnosticEngine,
    document: DocumentSnapshot,
    options: NoPxOptions | None = None,
) -> DiagnosticsRunResult:
    """Recompute and commit diagnostics for `document`."""
    diagnostics = engine.update(document, _resolve_options(options))
    return DiagnosticsRunResult(
        uri=document.uri,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def run_convert(text: str, options: NoPxOptions | None = None) -> ConvertRunResult:
    """Convert every non-ignored px literal of `text`."""
    resolved_options = _resolve_options(options)
    plan = plan_batch(text, resolved_options.ignore_policy(), resolved_options.base_font_size)
    return _apply(text, plan)


def run_convert_literal(
    text: str,
    literal: PixelLiteral,
    options: NoPxOptions | None = None,
) -> ConvertRunResult:
    """Convert the single literal `literal` found in `text`."""
    resolved_options = _resolve_options(options)
    return _apply(text, plan_for_literal(text, literal, resolved_options.base_font_size))


def run_will_save(document: DocumentSnapshot, options: NoPxOptions | None = None) -> ConvertRunResult:
    """Pre-save conversion; a no-op unless auto-convert is on and the file is supported."""
    resolved_options = _resolve_options(options)
    if not resolved_options.auto_convert_on_save or not resolved_options.is_supported_path(document.uri):
        return ConvertRunResult(plan=EditPlan.for_text(document.text), text=document.text, changed=False)
    return run_convert(document.text, resolved_options)


def _apply(text: str, plan: EditPlan) -> ConvertRunResult:
    converted = apply_edit_plan(text, plan)
    return ConvertRunResult(plan=plan, text=converted, changed=converted != text)


def _resolve_options(options: NoPxOptions | None) -> NoPxOptions:
    return options if options is not None else NoPxOptions()
