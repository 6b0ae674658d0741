"""Planning of px -> rem replacements over a text snapshot."""

from __future__ import annotations

from nopx.convert import DEFAULT_BASE_FONT_SIZE, parse_magnitude, to_rem
from nopx.edit.model import EditPlan, TextEdit
from nopx.errors import InvalidMagnitude
from nopx.matcher import find_pixel_literals
from nopx.scan import IgnorePolicy, PixelLiteral
from nopx.text import LineSpan


def plan_single(literal: PixelLiteral, base: float = DEFAULT_BASE_FONT_SIZE) -> TextEdit:
    """Edit replacing exactly `literal.raw_value` at its line/column."""
    magnitude = parse_magnitude(literal.raw_value)
    return TextEdit(
        span=LineSpan.on_line(literal.line, literal.column, len(literal.raw_value)),
        replacement=to_rem(magnitude, base),
        original=literal.raw_value,
    )


def plan_batch(text: str, policy: IgnorePolicy, base: float = DEFAULT_BASE_FONT_SIZE) -> EditPlan:
    """One edit per non-ignored literal of `text`, in document order.

    The plan is only valid against `text` itself; an empty plan means there
    is nothing to convert. Literals too large for a float are left as they are.
    """
    edits: list[TextEdit] = []
    for match in find_pixel_literals(text):
        try:
            magnitude = parse_magnitude(match.raw_value)
        except InvalidMagnitude:
            continue
        if policy.ignores(match.raw_value, magnitude):
            continue
        edits.append(
            TextEdit(
                span=LineSpan.on_line(match.line, match.column, len(match.raw_value)),
                replacement=to_rem(magnitude, base),
                original=match.raw_value,
            )
        )
    return EditPlan.for_text(text, tuple(edits))


def plan_for_literal(text: str, literal: PixelLiteral, base: float = DEFAULT_BASE_FONT_SIZE) -> EditPlan:
    return EditPlan.for_text(text, (plan_single(literal, base),))
