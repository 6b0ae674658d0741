"""Edit plan records."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
from typing import Literal, TypeAlias

from nopx.text import LineSpan

CodeActionKind: TypeAlias = Literal["quickfix", "source"]


def snapshot_digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace the characters of `span` (expected to read `original`) with `replacement`."""

    span: LineSpan
    replacement: str
    original: str


@dataclass(frozen=True, slots=True)
class EditPlan:
    """Ordered, non-overlapping edits bound to the snapshot they were computed from."""

    snapshot_digest: str
    edits: tuple[TextEdit, ...] = ()

    @staticmethod
    def for_text(text: str, edits: tuple[TextEdit, ...] = ()) -> "EditPlan":
        return EditPlan(snapshot_digest=snapshot_digest(text), edits=edits)

    @property
    def is_empty(self) -> bool:
        return not self.edits

    def __len__(self) -> int:
        return len(self.edits)

    def matches(self, text: str) -> bool:
        return self.snapshot_digest == snapshot_digest(text)


@dataclass(frozen=True, slots=True)
class CodeAction:
    title: str
    kind: CodeActionKind
    plan: EditPlan
    diagnostic_codes: tuple[str, ...] = ()
