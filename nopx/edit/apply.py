"""All-or-nothing application of an edit plan to a text snapshot."""

from __future__ import annotations

from nopx.edit.model import EditPlan
from nopx.errors import StaleSnapshot
from nopx.text import LineIndex, TextRange, TextSize, slice_text_range


def apply_edit_plan(text: str, plan: EditPlan) -> str:
    """Return `text` with every edit of `plan` applied.

    Raises StaleSnapshot when `text` is not the snapshot the plan was built
    from, and ValueError when edits overlap or fall outside the text. Either
    way nothing is applied.
    """
    if not plan.matches(text):
        raise StaleSnapshot("Document changed since the edit plan was computed")
    if plan.is_empty:
        return text

    index = LineIndex(text)
    bounds = TextRange.up_to(TextSize.of(text))
    resolved: list[tuple[TextRange, str]] = []
    for edit in plan.edits:
        edit_range = index.range_of(edit.span)
        if not bounds.contains_range(edit_range):
            raise ValueError(f"Edit {edit.span!r} falls outside the text")
        if slice_text_range(text, edit_range) != edit.original:
            raise StaleSnapshot(f"Expected {edit.original!r} at {edit.span!r}")
        resolved.append((edit_range, edit.replacement))

    resolved.sort(key=lambda item: item[0])
    for (previous, _), (current, _) in zip(resolved, resolved[1:]):
        if previous.ordering(current) != -1:
            raise ValueError(f"Overlapping edits at {previous!r} and {current!r}")

    parts: list[str] = []
    cursor = 0
    for edit_range, replacement in resolved:
        start, end = edit_range.as_tuple()
        parts.append(text[cursor:start])
        parts.append(replacement)
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)
