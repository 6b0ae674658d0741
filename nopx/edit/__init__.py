"""Edit planning and application."""

from nopx.edit.actions import CONVERT_ALL_TITLE, code_actions
from nopx.edit.apply import apply_edit_plan
from nopx.edit.model import CodeAction, CodeActionKind, EditPlan, TextEdit, snapshot_digest
from nopx.edit.planner import plan_batch, plan_for_literal, plan_single

__all__ = [
    "CONVERT_ALL_TITLE",
    "CodeAction",
    "CodeActionKind",
    "EditPlan",
    "TextEdit",
    "apply_edit_plan",
    "code_actions",
    "plan_batch",
    "plan_for_literal",
    "plan_single",
    "snapshot_digest",
]
