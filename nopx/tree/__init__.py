"""Folder/file/value hierarchy for scan results."""

from nopx.tree.group import group_literals
from nopx.tree.model import FileNode, FolderNode, HierarchyNode, NodeKind
from nopx.tree.render import (
    ROOT_FOLDER_LABEL,
    file_label,
    folder_label,
    iter_nodes,
    literal_label,
    literal_tooltip,
    render_tree,
)

__all__ = [
    "ROOT_FOLDER_LABEL",
    "FileNode",
    "FolderNode",
    "HierarchyNode",
    "NodeKind",
    "file_label",
    "folder_label",
    "group_literals",
    "iter_nodes",
    "literal_label",
    "literal_tooltip",
    "render_tree",
]
