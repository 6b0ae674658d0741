"""Quick fixes offered for px diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from nopx.convert import DEFAULT_BASE_FONT_SIZE, parse_magnitude, to_rem
from nopx.diagnostics import Diagnostic, PX_TO_REM, filter_own_diagnostics
from nopx.edit.model import CodeAction, EditPlan, TextEdit
from nopx.edit.planner import plan_batch
from nopx.matcher import PX_PATTERN
from nopx.scan import IgnorePolicy
from nopx.text import slice_text_range

CONVERT_ALL_TITLE: Final[str] = "Convert all px values to rem in this file"


def code_actions(
    text: str,
    diagnostics: Iterable[Diagnostic],
    policy: IgnorePolicy,
    base: float = DEFAULT_BASE_FONT_SIZE,
) -> tuple[CodeAction, ...]:
    """Quick fix per px diagnostic, plus one whole-file conversion.

    Diagnostics from other sources are skipped; so are ranges whose text no
    longer holds a px literal.
    """
    actions: list[CodeAction] = []
    for diagnostic in filter_own_diagnostics(diagnostics):
        covered = slice_text_range(text, diagnostic.range)
        match = PX_PATTERN.search(covered)
        if match is None:
            continue
        replacement = to_rem(parse_magnitude(match.group(0)), base)
        edit = TextEdit(span=diagnostic.span, replacement=replacement, original=covered)
        actions.append(
            CodeAction(
                title=f"Convert to {replacement}",
                kind="quickfix",
                plan=EditPlan.for_text(text, (edit,)),
                diagnostic_codes=(diagnostic.code,),
            )
        )

    if actions:
        actions.append(
            CodeAction(
                title=CONVERT_ALL_TITLE,
                kind="source",
                plan=plan_batch(text, policy, base),
                diagnostic_codes=(PX_TO_REM.code,),
            )
        )
    return tuple(actions)
